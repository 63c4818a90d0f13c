# topmark:header:start
#
#   project      : AnnoMark
#   file         : api.py
#   file_relpath : src/annomark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AnnoMark API.

Typical use::

    from annomark.api import extract, inject

    store = extract(MyModel.__doc__ or "")
    inject(store, destination)

All functions accept an optional frozen `Config`; defaults apply when it is
omitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from annomark.config.logging import get_logger
from annomark.core.injector import inject as _inject
from annomark.core.parser import AnnotationStore
from annomark.core.parser import extract as _extract
from annomark.core.parser import iter_entries

if TYPE_CHECKING:
    from pathlib import Path

    from annomark.config import Config
    from annomark.config.logging import AnnomarkLogger

logger: AnnomarkLogger = get_logger(__name__)

T = TypeVar("T")

__all__ = [
    "AnnotationStore",
    "emplace_annotation",
    "extract",
    "inject",
    "iter_entries",
    "parse_file",
]


def extract(text: str, *, config: Config | None = None) -> AnnotationStore:
    """Extract the annotations found in ``text``.

    Args:
        text (str): Comment text (docblock delimiters are tolerated).
        config (Config | None): Optional configuration.

    Returns:
        AnnotationStore: A new, independent store.
    """
    return _extract(text, config=config)


def parse_file(
    path: Path,
    *,
    encoding: str = "utf-8",
    config: Config | None = None,
) -> AnnotationStore:
    """Read ``path`` and extract its annotations.

    Args:
        path (Path): File to read.
        encoding (str): Text encoding of the file.
        config (Config | None): Optional configuration.

    Returns:
        AnnotationStore: The annotations in the file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in ``encoding``.
    """
    logger.debug("Extracting annotations from %s", path)
    text: str = path.read_text(encoding=encoding)
    return _extract(text, config=config)


def inject(store: AnnotationStore, destination: T, *, config: Config | None = None) -> T | None:
    """Populate ``destination`` from ``store``; None when its annotation is absent.

    See `annomark.core.injector.inject`.
    """
    return _inject(store, destination, config=config)


def emplace_annotation(
    text: str,
    destination: Any,
    *,
    config: Config | None = None,
) -> bool:
    """Extract ``text`` and inject into ``destination`` in one call.

    Returns:
        bool: True when ``text`` holds an annotation named ``destination.get_name()``.
    """
    return _extract(text, config=config).emplace_annotation(destination, config=config)
