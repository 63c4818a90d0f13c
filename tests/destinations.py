# topmark:header:start
#
#   project      : AnnoMark
#   file         : destinations.py
#   file_relpath : tests/destinations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named destination types shared by the injector, API and property tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


class SingleValue:
    """One field named ``value``."""

    def __init__(self, name: str = "default") -> None:
        self._name = name
        self.value: Any = None

    def get_name(self) -> str:
        return self._name

    def annotation_fields(self) -> list[str]:
        return ["value"]


class SingleName:
    """One field that is not called ``value``."""

    def __init__(self, name: str = "rename") -> None:
        self._name = name
        self.name: Any = None

    def get_name(self) -> str:
        return self._name

    def annotation_fields(self) -> list[str]:
        return ["name"]


class FooBar:
    """Two fields, neither named ``value``."""

    def __init__(self, name: str = "foo") -> None:
        self._name = name
        self.foo: Any = None
        self.bar: Any = None

    def get_name(self) -> str:
        return self._name

    def annotation_fields(self) -> list[str]:
        return ["foo", "bar"]


class ValueFooBar:
    """A ``value`` field next to two ordinary ones."""

    def __init__(self, name: str = "foo") -> None:
        self._name = name
        self.value: Any = None
        self.foo: Any = None
        self.bar: Any = None

    def get_name(self) -> str:
        return self._name

    def annotation_fields(self) -> list[str]:
        return ["value", "foo", "bar"]


class ValuesAndValue:
    """Both implicit slots, ``values`` and ``value``."""

    def __init__(self, name: str = "alias") -> None:
        self._name = name
        self.value: Any = None
        self.values: Any = None

    def get_name(self) -> str:
        return self._name

    def annotation_fields(self) -> list[str]:
        return ["value", "values"]


class CamelCase:
    """Field written in camel case, fed keys in other conventions."""

    def __init__(self) -> None:
        self.aCamelCaseValue: Any = None
        self.other: Any = None

    def get_name(self) -> str:
        return "case"

    def annotation_fields(self) -> list[str]:
        return ["aCamelCaseValue", "other"]


class Picky:
    """Rejects every write to ``bar`` and negative numbers anywhere."""

    def __init__(self) -> None:
        self.foo: Any = "unset"
        self.bar: Any = "unset"

    def get_name(self) -> str:
        return "picky"

    def annotation_fields(self) -> list[str]:
        return ["foo", "bar"]

    def accept_value(self, name: str, value: Any) -> bool:
        if name == "bar":
            return False
        return not (isinstance(value, (int, float)) and value < 0)


class PlainObject:
    """No field hook: fields come from the instance ``__dict__``."""

    def __init__(self) -> None:
        self.first: Any = None
        self.second: Any = None

    def get_name(self) -> str:
        return "plain"


class Slotted:
    """Fields declared through ``__slots__``."""

    __slots__ = ("left", "right")

    def __init__(self) -> None:
        self.left: Any = None
        self.right: Any = None

    def get_name(self) -> str:
        return "slotted"


@dataclass(frozen=True)
class FrozenRename:
    """Frozen dataclass destination."""

    serialize: Any = None
    deserialize: Any = None

    def get_name(self) -> str:
        return "rename"


@dataclass
class Tags:
    """Dataclass with a default list."""

    values: list[Any] = field(default_factory=list)
    value: Any = None

    def get_name(self) -> str:
        return "tag"


class ClassLevel:
    """Fields declared only at class level, with and without annotations."""

    kind: ClassVar[str] = "class-level"
    value = None
    other: int = 0

    def get_name(self) -> str:
        return "declared"


class Accented:
    """Field name with non-ASCII letters."""

    def __init__(self) -> None:
        self.naïveValue: Any = None
        self.other: Any = None

    def get_name(self) -> str:
        return "accented"

    def annotation_fields(self) -> list[str]:
        return ["naïveValue", "other"]
