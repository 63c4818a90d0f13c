# topmark:header:start
#
#   project      : AnnoMark
#   file         : __init__.py
#   file_relpath : src/annomark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark package.

AnnoMark reads docblock-style annotations (``@name value``,
``@name(key = value, ...)``) from comment text and injects them into the
fields of Python objects. It exposes a small typed API and a CLI.
"""

from __future__ import annotations

from annomark.api import emplace_annotation, extract, inject, iter_entries, parse_file
from annomark.config import Config, MutableConfig
from annomark.core import (
    AnnomarkConfigError,
    AnnomarkError,
    AnnotationEntry,
    AnnotationParser,
    AnnotationStore,
    AnnotationTarget,
    Convention,
)

__all__ = [
    "AnnomarkConfigError",
    "AnnomarkError",
    "AnnotationEntry",
    "AnnotationParser",
    "AnnotationStore",
    "AnnotationTarget",
    "Config",
    "Convention",
    "MutableConfig",
    "emplace_annotation",
    "extract",
    "inject",
    "iter_entries",
    "parse_file",
]
