# topmark:header:start
#
#   project      : AnnoMark
#   file         : values.py
#   file_relpath : src/annomark/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Coerce raw annotation text into typed values.

A raw value is decoded as a JSON literal (``42``, ``3.14``, ``true``, ``null``,
``"quoted"``, ``[1, 2]``, ``{"a": 1}``). Anything that is not valid JSON is
returned as the trimmed string. A missing value means presence only and
yields ``True``.
"""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, NoReturn

from annomark.config.logging import get_logger

if TYPE_CHECKING:
    from annomark.config.logging import AnnomarkLogger
    from annomark.core.types import AnnotationValue

logger: AnnomarkLogger = get_logger(__name__)


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN/Infinity by default; they are not JSON literals
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    # "1e999" overflows to inf, which has no JSON form
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def interpret(raw: str | None) -> AnnotationValue:
    """Return the typed value for a raw annotation or property value.

    Args:
        raw (str | None): Raw text following the annotation name or ``=``.
            None when the annotation or property carried no value at all.

    Returns:
        AnnotationValue: The decoded JSON value, ``True`` when ``raw`` is None,
            or the trimmed text when it is not valid JSON or holds a number
            too large for a float.
    """
    if raw is None:
        return True

    text: str = raw.strip()
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass
        logger.trace("Keeping %r as text: %s", text, exc)
        return text
