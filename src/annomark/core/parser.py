# topmark:header:start
#
#   project      : AnnoMark
#   file         : parser.py
#   file_relpath : src/annomark/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extract ``@name`` annotations from comment text.

Grammar, matched left to right without overlap:

- ``@name``: presence only, the value is ``True``;
- ``@name value``: the rest of the line is one raw value;
- ``@name(prop = value, flag, ...)``: a property list on one line. A value
  runs to the next unescaped comma (``\\,`` is a literal comma) or the closing
  parenthesis; a property without ``=`` is presence only.

Raw values go through `annomark.core.values.interpret`. Repeated
occurrences of the same name are merged into one `AnnotationStore` entry:

- scalar after scalar accumulates a list in encounter order;
- property lists merge into one dict, later keys overwriting earlier ones;
- a property list after a scalar moves the scalar (or the accumulated list)
  to the ``value`` (``values``) key of the new dict, and a scalar after a
  property list overwrites that dict's ``value`` key.

Text that does not fit the grammar is skipped, never reported as an error.
"""

from __future__ import annotations

import copy
import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from annomark.config.logging import get_logger
from annomark.constants import DEFAULT_MULTIPLE_FIELD, DEFAULT_SINGLE_FIELD
from annomark.core.types import AnnotationEntry
from annomark.core.values import interpret

if TYPE_CHECKING:
    from collections.abc import Iterator

    from annomark.config.logging import AnnomarkLogger
    from annomark.config.model import Config
    from annomark.core.types import AnnotationTarget, AnnotationValue, PropertyList

logger: AnnomarkLogger = get_logger(__name__)

ANNOTATION_RE: Final[re.Pattern[str]] = re.compile(
    r"@(?P<name>\w+)"
    r"(?:[ \t]+(?P<value>\S[^\r\n]*)"
    r"|\((?P<properties>[^\r\n]+?)\))?"
)
PROPERTY_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<name>[\w-]+)(?:\s*=\s*(?P<value>.+))?", re.DOTALL
)

# A docblock closing on the same line as the last annotation: "@since 1.2 */"
_COMMENT_CLOSE_RE: Final[re.Pattern[str]] = re.compile(r"\s*\*/\s*$")
_UNESCAPED_COMMA_RE: Final[re.Pattern[str]] = re.compile(r"(?<!\\),")


class _Kind(Enum):
    """How the value stored under a name was built."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAP = "map"


def _clean_value(raw: str | None) -> str | None:
    if raw is None:
        return None
    raw = _COMMENT_CLOSE_RE.sub("", raw)
    return raw if raw.strip() else None


def parse_properties(text: str) -> PropertyList:
    """Parse the inside of ``@name(...)`` into interpreted ``(name, value)`` pairs.

    Args:
        text (str): The property list without the surrounding parentheses.

    Returns:
        PropertyList: The valid properties in order; malformed ones are skipped.
    """
    pairs: list[tuple[str, AnnotationValue]] = []
    for chunk in _UNESCAPED_COMMA_RE.split(text):
        prop = chunk.strip()
        match = PROPERTY_RE.match(prop)
        if match is None:
            if prop:
                logger.debug("Skipping malformed property %r", prop)
            continue
        raw = match.group("value")
        if raw is not None:
            raw = raw.replace("\\,", ",")
        pairs.append((match.group("name").strip(), interpret(raw)))
    return tuple(pairs)


class AnnotationStore:
    """Annotations accumulated from one piece of text, keyed by name.

    Built by `AnnotationParser.parse`; read-only for callers. `get` and
    `as_dict` hand out copies so the store keeps its contents for repeated
    injections.
    """

    __slots__ = ("_annotations", "_kinds", "_single_field", "_multiple_field")

    def __init__(
        self,
        *,
        single_field: str = DEFAULT_SINGLE_FIELD,
        multiple_field: str = DEFAULT_MULTIPLE_FIELD,
    ) -> None:
        self._annotations: dict[str, AnnotationValue] = {}
        self._kinds: dict[str, _Kind] = {}
        self._single_field = single_field
        self._multiple_field = multiple_field

    # --- building (parser only) ---

    def _add(self, entry: AnnotationEntry) -> None:
        if entry.properties is not None:
            self._add_properties(entry.name, entry.properties)
        else:
            self._add_scalar(entry.name, entry.value)

    def _add_scalar(self, name: str, value: AnnotationValue) -> None:
        kind = self._kinds.get(name)
        if kind is None:
            self._annotations[name] = value
            self._kinds[name] = _Kind.SCALAR
        elif kind is _Kind.SCALAR:
            self._annotations[name] = [self._annotations[name], value]
            self._kinds[name] = _Kind.SEQUENCE
        elif kind is _Kind.SEQUENCE:
            self._annotations[name].append(value)  # type: ignore[union-attr]
        else:
            self._annotations[name][self._single_field] = value  # type: ignore[index]

    def _add_properties(self, name: str, properties: PropertyList) -> None:
        kind = self._kinds.get(name)
        target: dict[str, Any]
        if kind is None:
            target = {}
        elif kind is _Kind.MAP:
            target = self._annotations[name]  # type: ignore[assignment]
        elif kind is _Kind.SCALAR:
            target = {self._single_field: self._annotations[name]}
        else:
            target = {self._multiple_field: self._annotations[name]}

        for prop_name, prop_value in properties:
            target[prop_name] = prop_value
        self._annotations[name] = target
        self._kinds[name] = _Kind.MAP

    # --- lookup ---

    def has(self, name: str) -> bool:
        """Return True if at least one ``@name`` occurrence was extracted."""
        return name in self._annotations

    def get(self, name: str, default: AnnotationValue = None) -> AnnotationValue:
        """Return a copy of the accumulated value for ``name``, or ``default``."""
        if name not in self._annotations:
            return default
        return copy.deepcopy(self._annotations[name])

    def names(self) -> list[str]:
        """Return annotation names in order of first occurrence."""
        return list(self._annotations)

    def as_dict(self) -> dict[str, AnnotationValue]:
        """Return a deep copy of all annotations as a plain dict."""
        return copy.deepcopy(self._annotations)

    def inject(self, destination: AnnotationTarget, *, config: Config | None = None):
        """Inject the payload for ``destination.get_name()`` into ``destination``.

        See `annomark.core.injector.inject`.
        """
        from annomark.core.injector import inject

        return inject(self, destination, config=config)

    def emplace_annotation(
        self, destination: AnnotationTarget, *, config: Config | None = None
    ) -> bool:
        """Inject into ``destination`` and report whether its name was found."""
        return self.inject(destination, config=config) is not None

    def __contains__(self, name: object) -> bool:
        return name in self._annotations

    def __len__(self) -> int:
        return len(self._annotations)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._annotations))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationStore):
            return NotImplemented
        return self._annotations == other._annotations and self._kinds == other._kinds

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AnnotationStore({self._annotations!r})"


class AnnotationParser:
    """Scan comment text and build `AnnotationStore` instances.

    The parser holds no state between calls; every `parse` returns a fresh,
    independent store.

    Args:
        config (Config | None): Supplies the ``value`` / ``values`` slot names used
            when scalar and property occurrences of one name are mixed.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.single_field: str = config.single_field if config else DEFAULT_SINGLE_FIELD
        self.multiple_field: str = config.multiple_field if config else DEFAULT_MULTIPLE_FIELD

    def iter_entries(self, text: str) -> Iterator[AnnotationEntry]:
        """Yield every annotation occurrence in ``text``, in order.

        Args:
            text (str): Comment text, delimiters included or not.

        Yields:
            AnnotationEntry: One entry per ``@name`` match.
        """
        offset = 0
        while True:
            match = ANNOTATION_RE.search(text, offset)
            if match is None:
                return
            # The match always consumes at least "@" plus one word character
            offset = match.end()
            name = match.group("name")
            properties = match.group("properties")

            entry: AnnotationEntry
            if properties is not None:
                entry = AnnotationEntry(
                    name=name,
                    properties=parse_properties(properties),
                    span=match.span(),
                )
            else:
                entry = AnnotationEntry(
                    name=name,
                    value=interpret(_clean_value(match.group("value"))),
                    span=match.span(),
                )
            logger.trace("Matched %r at %d..%d: %s", name, *match.span(), entry)
            yield entry

    def parse(self, text: str) -> AnnotationStore:
        """Extract all annotations from ``text`` into a new store.

        Args:
            text (str): Comment text, delimiters included or not.

        Returns:
            AnnotationStore: The merged annotations.
        """
        store = AnnotationStore(single_field=self.single_field, multiple_field=self.multiple_field)
        count = 0
        for entry in self.iter_entries(text):
            store._add(entry)
            count += 1
        logger.debug("Extracted %d occurrence(s) of %d annotation(s)", count, len(store))
        return store


_DEFAULT_PARSER = AnnotationParser()


def extract(text: str, *, config: Config | None = None) -> AnnotationStore:
    """Extract the annotations in ``text``.

    Args:
        text (str): Comment text.
        config (Config | None): Optional configuration; defaults apply when None.

    Returns:
        AnnotationStore: A new store for this text.
    """
    parser = _DEFAULT_PARSER if config is None else AnnotationParser(config)
    return parser.parse(text)


def iter_entries(text: str) -> Iterator[AnnotationEntry]:
    """Yield the raw annotation occurrences in ``text`` (no merging)."""
    return _DEFAULT_PARSER.iter_entries(text)
