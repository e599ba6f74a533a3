"""FastAPI HAL (Hypertext Application Language) document package."""

from .core.document import HALDocumentBuilder, parse, render
from .core.errors import HALErrorBuilder
from .core.link import Link
from .core.resource import Resource, ToResource, to_resource
from .core.value import ToValue, Value, to_value
from .exceptions import (
    HALError,
    MalformedHref,
    MalformedLink,
    MissingRequiredField,
    TypeMismatch,
    UnsupportedValue,
)
from .responses import HALJSONResponse
from .routers.base import HALRouter
from .serializers.base import HALSerializer

__all__ = [
    "HALDocumentBuilder",
    "HALError",
    "HALErrorBuilder",
    "HALJSONResponse",
    "HALRouter",
    "HALSerializer",
    "Link",
    "MalformedHref",
    "MalformedLink",
    "MissingRequiredField",
    "Resource",
    "ToResource",
    "ToValue",
    "TypeMismatch",
    "UnsupportedValue",
    "Value",
    "parse",
    "render",
    "to_resource",
    "to_value",
]
