# topmark:header:start
#
#   project      : AnnoMark
#   file         : __init__.py
#   file_relpath : src/annomark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for AnnoMark.

Re-exports the `Config` / `MutableConfig` pair and the logging helpers.
Configuration is read from ``annomark.toml`` or ``[tool.annomark]`` in
``pyproject.toml``; see `annomark.config.model` for the merge order.
"""

from __future__ import annotations

from annomark.config.logging import AnnomarkLogger, get_logger, setup_logging
from annomark.config.model import Config, MutableConfig

__all__ = [
    "AnnomarkLogger",
    "Config",
    "MutableConfig",
    "get_logger",
    "setup_logging",
]
