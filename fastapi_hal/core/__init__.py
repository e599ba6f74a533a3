"""Core HAL data model and document helpers."""

from .document import HALDocumentBuilder, parse, render
from .errors import HALErrorBuilder
from .link import Link
from .resource import Resource, ToResource, to_resource
from .value import (
    Bool,
    Float,
    List,
    Null,
    Object,
    SignedInt,
    Text,
    ToValue,
    UnsignedInt,
    Value,
    to_value,
    value_to_json,
)

__all__ = [
    "Bool",
    "Float",
    "HALDocumentBuilder",
    "HALErrorBuilder",
    "Link",
    "List",
    "Null",
    "Object",
    "Resource",
    "SignedInt",
    "Text",
    "ToResource",
    "ToValue",
    "UnsignedInt",
    "Value",
    "parse",
    "render",
    "to_resource",
    "to_value",
    "value_to_json",
]
