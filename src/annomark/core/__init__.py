# topmark:header:start
#
#   project      : AnnoMark
#   file         : __init__.py
#   file_relpath : src/annomark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core annotation extraction and injection."""

from __future__ import annotations

from annomark.core.casing import DEFAULT_CONVENTIONS, Convention, candidate_names, convert
from annomark.core.errors import AnnomarkConfigError, AnnomarkError
from annomark.core.injector import FieldInjector, inject
from annomark.core.introspection import introspect
from annomark.core.parser import AnnotationParser, AnnotationStore, extract, iter_entries
from annomark.core.types import (
    AnnotationEntry,
    AnnotationTarget,
    AnnotationValue,
    FieldDescriptor,
)
from annomark.core.values import interpret

__all__ = [
    "DEFAULT_CONVENTIONS",
    "AnnomarkConfigError",
    "AnnomarkError",
    "AnnotationEntry",
    "AnnotationParser",
    "AnnotationStore",
    "AnnotationTarget",
    "AnnotationValue",
    "Convention",
    "FieldDescriptor",
    "FieldInjector",
    "candidate_names",
    "convert",
    "extract",
    "inject",
    "interpret",
    "introspect",
    "iter_entries",
]
