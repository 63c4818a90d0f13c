# topmark:header:start
#
#   project      : AnnoMark
#   file         : errors.py
#   file_relpath : src/annomark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for AnnoMark.

Extraction and injection never raise for malformed comment text: unknown
syntax is skipped and undecodable values stay strings. These exceptions only
signal misuse of the library itself, such as an invalid configuration.
CLI-facing errors live in `annomark.cli.errors`.
"""

from __future__ import annotations


class AnnomarkError(Exception):
    """Base class for all AnnoMark library errors."""


class AnnomarkConfigError(AnnomarkError, ValueError):
    """Invalid configuration value (unknown convention, empty slot name, ...)."""
