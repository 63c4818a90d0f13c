# topmark:header:start
#
#   project      : AnnoMark
#   file         : injector.py
#   file_relpath : src/annomark/core/injector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inject an extracted annotation payload into a destination object.

Resolution of the payload stored under ``destination.get_name()``:

- not a dict, destination has exactly one field: the payload is written to
  that field as is;
- a list, several fields: handled as ``{"values": payload}``;
- any other non-dict, several fields: handled as ``{"value": payload}``;
- a dict: every destination field looks up its own name, then the case
  conventions of `annomark.core.casing` in priority order. The first
  candidate present as a key supplies the value.

Each write is gated by ``destination.accept_value(field, value)`` when the
destination defines it. Fields without a match, or rejected by the gate,
keep their current value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from annomark.config.logging import get_logger
from annomark.constants import DEFAULT_MULTIPLE_FIELD, DEFAULT_SINGLE_FIELD
from annomark.core.casing import DEFAULT_CONVENTIONS, candidate_names
from annomark.core.introspection import introspect

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from annomark.config.logging import AnnomarkLogger
    from annomark.config.model import Config
    from annomark.core.casing import Convention
    from annomark.core.parser import AnnotationStore
    from annomark.core.types import AnnotationValue, FieldDescriptor

logger: AnnomarkLogger = get_logger(__name__)

T = TypeVar("T")


class FieldInjector:
    """Write one annotation payload into the fields of one destination.

    Args:
        destination (Any): The object to populate.
        config (Config | None): Slot names and convention order; defaults apply when None.
    """

    def __init__(self, destination: Any, config: Config | None = None) -> None:
        self.destination = destination
        self.fields: list[FieldDescriptor] = introspect(destination)
        self.single_field: str = config.single_field if config else DEFAULT_SINGLE_FIELD
        self.multiple_field: str = config.multiple_field if config else DEFAULT_MULTIPLE_FIELD
        self.conventions: Sequence[Convention] = (
            config.conventions if config else DEFAULT_CONVENTIONS
        )

    def emplace(self, payload: AnnotationValue) -> None:
        """Resolve ``payload`` against the destination's fields and write it."""
        if isinstance(payload, dict):
            self.assign_properties(payload)
        elif len(self.fields) == 1:
            self.assign(self.fields[0], payload)
        elif isinstance(payload, list):
            self.assign_properties({self.multiple_field: payload})
        else:
            self.assign_properties({self.single_field: payload})

    def assign_properties(self, payload: Mapping[str, AnnotationValue]) -> None:
        """Write matching keys of ``payload`` into the destination's fields."""
        for descriptor in self.fields:
            key = self.find_key(payload, descriptor.name)
            if key is None:
                logger.trace("No key for field %r in %s", descriptor.name, list(payload))
                continue
            self.assign(descriptor, payload[key])

    def find_key(self, payload: Mapping[str, AnnotationValue], field_name: str) -> str | None:
        """Return the first candidate name for ``field_name`` present in ``payload``."""
        for candidate in candidate_names(field_name, self.conventions):
            if candidate in payload:
                return candidate
        return None

    def accepts(self, field_name: str, value: AnnotationValue) -> bool:
        """Ask the destination's ``accept_value`` hook, if any."""
        gate = getattr(self.destination, "accept_value", None)
        if not callable(gate):
            return True
        return bool(gate(field_name, value))

    def assign(self, descriptor: FieldDescriptor, value: AnnotationValue) -> None:
        """Write ``value`` into ``descriptor`` unless the destination rejects it."""
        if not self.accepts(descriptor.name, value):
            logger.debug("Destination rejected %r for field %r", value, descriptor.name)
            return
        descriptor.write(value)
        logger.trace("Set field %r to %r", descriptor.name, value)


def inject(store: AnnotationStore, destination: T, *, config: Config | None = None) -> T | None:
    """Populate ``destination`` from the annotation named ``destination.get_name()``.

    Args:
        store (AnnotationStore): Annotations extracted from one text.
        destination (T): Object exposing ``get_name()`` (see `AnnotationTarget`).
        config (Config | None): Optional configuration.

    Returns:
        T | None: ``destination`` after injection, or None when the store has no
            annotation of that name (nothing is written then).
    """
    name: str = destination.get_name()  # type: ignore[attr-defined]
    if not store.has(name):
        logger.debug("No @%s annotation for %s", name, type(destination).__name__)
        return None

    FieldInjector(destination, config).emplace(store.get(name))
    return destination
