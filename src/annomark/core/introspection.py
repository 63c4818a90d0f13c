# topmark:header:start
#
#   project      : AnnoMark
#   file         : introspection.py
#   file_relpath : src/annomark/core/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerate the writable fields of a destination object.

Field discovery, in order of preference:

1. ``obj.annotation_fields()`` when the object declares its fields explicitly;
2. `dataclasses.fields` for dataclass instances;
3. otherwise class-level attributes (annotated or plain, base classes first),
   then ``__slots__`` declared along the class hierarchy, then the instance
   ``__dict__``. Methods, properties and ``ClassVar`` annotations are skipped.

Writers go through ``object.__setattr__`` so frozen dataclasses can be
populated as well.
"""

from __future__ import annotations

import dataclasses
import inspect
from typing import TYPE_CHECKING, Any

from annomark.config.logging import get_logger
from annomark.core.types import FieldDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from annomark.config.logging import AnnomarkLogger
    from annomark.core.types import AnnotationValue

logger: AnnomarkLogger = get_logger(__name__)


def _writer_for(obj: Any, name: str):
    def _write(value: AnnotationValue) -> None:
        object.__setattr__(obj, name, value)

    return _write


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in ("__dict__", "__weakref__") and slot not in names:
                names.append(slot)
    return names


def _class_level_names(cls: type) -> list[str]:
    names: list[str] = []
    class_vars: set[str] = set()
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, annotation in inspect.get_annotations(klass).items():
            if "ClassVar" in str(annotation):
                class_vars.add(name)
            elif not name.startswith("_") and name not in names:
                names.append(name)
        for name, attr in klass.__dict__.items():
            if name.startswith("_") or name in names or name in class_vars:
                continue
            if callable(attr) or hasattr(attr, "__get__"):
                continue
            names.append(name)
    return names


def field_names(obj: Any) -> list[str]:
    """Return the names of the writable fields of ``obj`` in declaration order.

    Args:
        obj (Any): The destination object.

    Returns:
        list[str]: Field names; dunder names are never included.
    """
    declared = getattr(obj, "annotation_fields", None)
    names: Iterable[str]
    if callable(declared):
        names = declared()
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        names = [f.name for f in dataclasses.fields(obj)]
    else:
        found = _class_level_names(type(obj))
        found += [n for n in _slot_names(type(obj)) if n not in found]
        if hasattr(obj, "__dict__"):
            found += [n for n in vars(obj) if n not in found]
        names = found

    return [n for n in names if not n.startswith("__")]


def introspect(obj: Any) -> list[FieldDescriptor]:
    """Return ordered, writable field descriptors for ``obj``.

    Args:
        obj (Any): The destination object.

    Returns:
        list[FieldDescriptor]: One descriptor per field.
    """
    fields = [FieldDescriptor(name=name, writer=_writer_for(obj, name)) for name in field_names(obj)]
    logger.trace("Fields of %s: %s", type(obj).__name__, [f.name for f in fields])
    return fields
