"""Exceptions raised while converting values and reconstructing HAL documents."""

from typing import Any


class HALError(Exception):
    """Base class for HAL document errors."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MalformedLink(HALError):
    """A link object could not be reconstructed."""


class MissingRequiredField(MalformedLink):
    """A required link attribute (``href``) is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field '{field}'.", field=field)


class TypeMismatch(HALError, TypeError):
    """A JSON member is present but has the wrong type."""

    def __init__(self, field: str | None, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = _json_type_name(actual)
        where = f"'{field}'" if field else "document"
        super().__init__(
            f"Expected {expected} for {where}, got {self.actual}.", field=field
        )


class MalformedHref(TypeMismatch, MalformedLink):
    """A link's ``href`` is present but not a string."""

    def __init__(self, actual: Any) -> None:
        super().__init__("href", "string", actual)


class UnsupportedValue(HALError, ValueError):
    """A value cannot be represented in the HAL state model."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        detail = reason or f"unsupported type {type(value).__name__}"
        super().__init__(f"Cannot convert {value!r}: {detail}.")


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
