# topmark:header:start
#
#   project      : AnnoMark
#   file         : types.py
#   file_relpath : src/annomark/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared types for the extractor and injector.

`AnnotationValue` is the set of plain Python values an annotation can carry:
JSON scalars, flat lists and single-level ``str``-keyed dicts.

`AnnotationTarget` is the structural contract a destination object must
satisfy. Only ``get_name()`` is required; ``accept_value()`` and
``annotation_fields()`` are optional hooks looked up at runtime.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

AnnotationScalar = Union[None, bool, int, float, str]
AnnotationValue = Union[AnnotationScalar, list[Any], dict[str, Any]]

# (name, value) pairs in the order they appear inside ``@name(...)``
PropertyList = tuple[tuple[str, AnnotationValue], ...]


@runtime_checkable
class AnnotationTarget(Protocol):
    """An object that wants the payload of one annotation injected into it.

    Optional hooks, detected with ``getattr``:

    - ``accept_value(name: str, value: AnnotationValue) -> bool``: gate each
      field write; a falsy result leaves the field untouched.
    - ``annotation_fields() -> Iterable[str]``: declare the writable fields
      explicitly instead of relying on dataclass fields or ``__dict__``.
    """

    def get_name(self) -> str:
        """Return the annotation name this object is populated from."""
        ...


@dataclass(frozen=True)
class AnnotationEntry:
    """One ``@name ...`` occurrence found in comment text.

    Attributes:
        name (str): The annotation name (the identifier after ``@``).
        value (AnnotationValue): Interpreted scalar value; ``True`` for a bare
            annotation. Unused when ``properties`` is set.
        properties (PropertyList | None): Interpreted ``(name, value)`` pairs when the
            occurrence carries a parenthesized property list.
        span (tuple[int, int]): ``(start, end)`` offsets of the match in the source text.
    """

    name: str
    value: AnnotationValue = True
    properties: PropertyList | None = None
    span: tuple[int, int] = (0, 0)

    @property
    def is_property_list(self) -> bool:
        """Whether this occurrence used the ``@name(prop = value, ...)`` form."""
        return self.properties is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        if self.properties is not None:
            return {
                "name": self.name,
                "properties": dict(self.properties),
                "span": list(self.span),
            }
        return {"name": self.name, "value": self.value, "span": list(self.span)}


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, writable field of a destination object.

    Attributes:
        name (str): Attribute name on the destination.
        writer (Callable[[AnnotationValue], None]): Assigns a value to that attribute.
    """

    name: str
    writer: Callable[[AnnotationValue], None]

    def write(self, value: AnnotationValue) -> None:
        """Assign ``value`` to the underlying field."""
        self.writer(value)
