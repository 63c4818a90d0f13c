# topmark:header:start
#
#   project      : AnnoMark
#   file         : casing.py
#   file_relpath : src/annomark/core/casing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identifier case conventions used to match annotation keys to field names.

An identifier is split into words on ``_``, ``-``, whitespace and camel humps,
then re-joined in the target convention. The injector tries the conventions
in `DEFAULT_CONVENTIONS` order and the first one that names an existing key
wins, so the order is part of the matching contract.

Camel humps are found with `str.isupper` / `str.isalpha`, so non-ASCII letters
split like ASCII ones (``naïveValue`` -> ``naïve``, ``Value``). A run of
capitals is one word unless a lowercase letter follows, in which case its last
capital starts the next word (``HTTPServer`` -> ``HTTP``, ``Server``).

Converting a converted name again gives the same name only when no
single-letter word touches another capitalized word: ``aA`` splits into
``a``, ``A`` but its PascalCase form ``AA`` reads back as one acronym.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_DELIMITER_RE: Final[re.Pattern[str]] = re.compile(r"[\s_\-]+")


class Convention(str, Enum):
    """Supported identifier case conventions."""

    LOWER = "lower"
    SNAKE = "snake"
    KEBAB = "kebab"
    UPPER_SNAKE = "upper_snake"
    TRAIN = "train"
    CAMEL = "camel"
    PASCAL = "pascal"

    @classmethod
    def parse(cls, value: str) -> Convention:
        """Return the convention named ``value`` (case-insensitive, ``-`` or ``_``).

        Raises:
            ValueError: If ``value`` names no convention.
        """
        key = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unknown case convention '{value}'. Must be one of: {', '.join(m.value for m in cls)}"
        )


DEFAULT_CONVENTIONS: tuple[Convention, ...] = (
    Convention.LOWER,
    Convention.SNAKE,
    Convention.KEBAB,
    Convention.UPPER_SNAKE,
    Convention.TRAIN,
    Convention.CAMEL,
    Convention.PASCAL,
)


def split_words(name: str) -> list[str]:
    """Split an identifier into its words.

    Args:
        name (str): Identifier in any of the supported conventions.

    Returns:
        list[str]: The words, with their original casing.
    """
    words: list[str] = []
    for chunk in _DELIMITER_RE.split(name):
        if chunk:
            words.extend(_split_humps(chunk))
    return words


def _is_lower(char: str) -> bool:
    # Uncased letters (CJK, etc.) count as lowercase so they stay in one word.
    return char.isalpha() and not char.isupper()


def _split_humps(chunk: str) -> Iterator[str]:
    i = 0
    n = len(chunk)
    while i < n:
        char = chunk[i]
        if char.isdigit():
            j = i
            while j < n and chunk[j].isdigit():
                j += 1
            yield chunk[i:j]
        elif char.isupper():
            j = i
            while j < n and chunk[j].isupper():
                j += 1
            if j < n and _is_lower(chunk[j]):
                if j - i > 1:
                    # "HTTPServer": the last capital opens the next word
                    yield chunk[i : j - 1]
                    i = j - 1
                    continue
                while j < n and _is_lower(chunk[j]):
                    j += 1
            yield chunk[i:j]
        elif _is_lower(char):
            j = i
            while j < n and _is_lower(chunk[j]):
                j += 1
            yield chunk[i:j]
        else:
            j = i + 1
        i = j


def _own_delimiter(name: str) -> str:
    if "_" in name:
        return "_"
    if "-" in name:
        return "-"
    return ""


def convert(name: str, convention: Convention) -> str:
    """Return ``name`` rewritten in ``convention``.

    ``LOWER`` keeps the delimiter ``name`` already uses (none for camel-case
    input). An identifier without words is returned unchanged.

    Args:
        name (str): The identifier to convert.
        convention (Convention): The target convention.

    Returns:
        str: The converted identifier.
    """
    words = split_words(name)
    if not words:
        return name

    lowered = [w.lower() for w in words]
    if convention is Convention.LOWER:
        return _own_delimiter(name).join(lowered)
    if convention is Convention.SNAKE:
        return "_".join(lowered)
    if convention is Convention.KEBAB:
        return "-".join(lowered)
    if convention is Convention.UPPER_SNAKE:
        return "_".join(w.upper() for w in words)
    if convention is Convention.TRAIN:
        return "-".join(w.capitalize() for w in words)
    if convention is Convention.CAMEL:
        return lowered[0] + "".join(w.capitalize() for w in words[1:])
    return "".join(w.capitalize() for w in words)


def candidate_names(
    name: str,
    conventions: Iterable[Convention] = DEFAULT_CONVENTIONS,
) -> Iterator[str]:
    """Yield ``name`` followed by its conversions, skipping repeats.

    Args:
        name (str): The field name to look up.
        conventions (Iterable[Convention]): Conventions to try, in priority order.

    Yields:
        str: Candidate keys, exact name first.
    """
    seen: set[str] = {name}
    yield name
    for convention in conventions:
        candidate = convert(name, convention)
        if candidate not in seen:
            seen.add(candidate)
            yield candidate
