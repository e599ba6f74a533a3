"""State values: a closed union of JSON-compatible variants."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

from fastapi_hal.exceptions import UnsupportedValue

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class SignedInt:
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not I64_MIN <= self.value <= I64_MAX:
            raise UnsupportedValue(self.value, "outside the signed 64-bit range")

    def to_json(self) -> int:
        return self.value


@dataclass(frozen=True)
class UnsignedInt:
    """Unsigned 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= U64_MAX:
            raise UnsupportedValue(self.value, "outside the unsigned 64-bit range")

    def to_json(self) -> int:
        return self.value


@dataclass(frozen=True)
class Float:
    """Finite double precision number."""

    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise UnsupportedValue(self.value, "JSON has no non-finite numbers")

    def to_json(self) -> float:
        return self.value


@dataclass(frozen=True)
class Text:
    value: str

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bool:
    value: bool

    def to_json(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Null:
    def to_json(self) -> None:
        return None


@dataclass(frozen=True)
class List:
    """Ordered sequence of values."""

    items: tuple[Value, ...] = ()

    def to_json(self) -> list[Any]:
        return [item.to_json() for item in self.items]


@dataclass(frozen=True)
class Object:
    """String-keyed mapping of values, kept in key order."""

    entries: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(sorted(self.entries, key=lambda e: e[0])))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Object:
        """Build an object from any string-keyed mapping, converting its values."""
        entries = []
        for key, item in mapping.items():
            if not isinstance(key, str):
                raise UnsupportedValue(key, "object keys must be strings")
            entries.append((key, to_value(item)))
        return cls(tuple(entries))

    def to_json(self) -> dict[str, Any]:
        return {key: item.to_json() for key, item in self.entries}


Value = Union[SignedInt, UnsignedInt, Float, Text, Bool, Null, List, Object]

VALUE_TYPES = (SignedInt, UnsignedInt, Float, Text, Bool, Null, List, Object)

NULL = Null()


@runtime_checkable
class ToValue(Protocol):
    """Implemented by domain types that know their own state representation."""

    def to_value(self) -> Value: ...


def to_value(obj: Any) -> Value:
    """Convert a native Python object into a state value.

    ``None`` stands for an empty optional and becomes ``Null``, as do NaN and
    the infinities. Any other object is converted by type. Booleans are
    checked before integers since ``bool`` subclasses ``int``.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        if obj > I64_MAX:
            return UnsignedInt(obj)
        return SignedInt(obj)
    if isinstance(obj, float):
        # JSON has no NaN or infinity; they are written as null.
        return Float(obj) if math.isfinite(obj) else NULL
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, ToValue):
        return obj.to_value()
    if isinstance(obj, Mapping):
        return Object.from_mapping(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (bytes, bytearray)):
        return List(tuple(to_value(item) for item in obj))
    raise UnsupportedValue(obj)


def value_to_json(value: Value) -> Any:
    """Return the generic JSON form of a state value."""
    if not isinstance(value, VALUE_TYPES):
        raise UnsupportedValue(value, "not a HAL state value")
    return value.to_json()
