# topmark:header:start
#
#   project      : AnnoMark
#   file         : constants.py
#   file_relpath : src/annomark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    ANNOMARK_VERSION: str = get_version("annomark")
except PackageNotFoundError:  # running from a source checkout
    ANNOMARK_VERSION = "0.0.0"

LOG_LEVEL_ENV_VAR: Final[str] = "ANNOMARK_LOG_LEVEL"

# Project configuration files, in lookup order
ANNOMARK_TOML_NAME: Final[str] = "annomark.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.annomark"

# Injector slots for payloads that are not property maps
DEFAULT_SINGLE_FIELD: Final[str] = "value"
DEFAULT_MULTIPLE_FIELD: Final[str] = "values"

# Accepted by the CLI as "read from STDIN"
STDIN_SENTINEL: Final[str] = "-"
STDIN_DISPLAY_NAME: Final[str] = "<stdin>"
