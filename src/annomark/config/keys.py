# topmark:header:start
#
#   project      : AnnoMark
#   file         : keys.py
#   file_relpath : src/annomark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for AnnoMark configuration.

These keys are the external configuration API, as read from ``annomark.toml``
and from ``[tool.annomark]`` in ``pyproject.toml``. Renaming or removing a
key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by AnnoMark configuration."""

    # [injector]
    SECTION_INJECTOR: Final[str] = "injector"

    KEY_SINGLE_FIELD: Final[str] = "single_field"
    KEY_MULTIPLE_FIELD: Final[str] = "multiple_field"
    KEY_CONVENTIONS: Final[str] = "conventions"
