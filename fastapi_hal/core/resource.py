"""HAL resources and the conversion contract for domain types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, Union, runtime_checkable

from fastapi_hal.core.link import Link
from fastapi_hal.core.value import Value, to_value
from fastapi_hal.exceptions import TypeMismatch

logger = logging.getLogger(__name__)

LINKS_KEY = "_links"
EMBEDDED_KEY = "_embedded"
CURIES_REL = "curies"


@runtime_checkable
class ToResource(Protocol):
    """Implemented by domain types that can represent themselves as a resource."""

    def to_resource(self) -> Resource: ...


def to_resource(obj: Union[Resource, ToResource]) -> Resource:
    """Return ``obj`` as a resource, converting ``ToResource`` implementers."""
    if isinstance(obj, Resource):
        return obj
    if isinstance(obj, ToResource):
        return obj.to_resource()
    raise TypeError(f"Cannot convert {type(obj).__name__} to a HAL resource.")


class Resource:
    """A HAL resource: state fields, link relations and embedded resources.

    Resources are persistent values. Every ``add_*`` method returns a new
    resource and leaves the receiver untouched, so a child can be shared
    between trees without aliasing a later change into another parent.
    """

    __slots__ = ("_state", "_links", "_embedded")

    def __init__(self) -> None:
        self._state: dict[str, Value] = {}
        self._links: dict[str, tuple[Link, ...]] = {}
        self._embedded: dict[str, tuple[Resource, ...]] = {}

    @classmethod
    def with_self(cls, href: str) -> Resource:
        """Return an empty resource carrying a ``self`` link."""
        return cls().add_link("self", Link(href))

    @property
    def state(self) -> Mapping[str, Value]:
        return MappingProxyType(self._state)

    @property
    def links(self) -> Mapping[str, tuple[Link, ...]]:
        return MappingProxyType(self._links)

    @property
    def embedded(self) -> Mapping[str, tuple[Resource, ...]]:
        return MappingProxyType(self._embedded)

    def _evolve(
        self,
        *,
        state: dict[str, Value] | None = None,
        links: dict[str, tuple[Link, ...]] | None = None,
        embedded: dict[str, tuple[Resource, ...]] | None = None,
    ) -> Resource:
        resource = Resource.__new__(Resource)
        resource._state = _sorted(state) if state is not None else self._state
        resource._links = _sorted(links) if links is not None else self._links
        resource._embedded = _sorted(embedded) if embedded is not None else self._embedded
        return resource

    def add_state(self, key: str, value: Any) -> Resource:
        """Set state field ``key``, replacing any previous value."""
        return self._evolve(state={**self._state, key: to_value(value)})

    def add_link(self, rel: str, link: Link) -> Resource:
        """Append ``link`` to relation ``rel``."""
        return self._evolve(links={**self._links, rel: self._links.get(rel, ()) + (link,)})

    def add_curie(self, name: str, href: str) -> Resource:
        """Append a templated CURIE link named ``name``."""
        return self.add_link(CURIES_REL, Link(href, templated=True, name=name))

    def add_resource(self, rel: str, resource: Union[Resource, ToResource]) -> Resource:
        """Append an embedded resource to relation ``rel``."""
        child = to_resource(resource)
        return self._evolve(
            embedded={**self._embedded, rel: self._embedded.get(rel, ()) + (child,)}
        )

    def to_generic_json(self) -> dict[str, Any]:
        """Return the HAL document for this resource as plain JSON data."""
        from fastapi_hal.core.document import HALDocumentBuilder

        return HALDocumentBuilder().build(self)

    @classmethod
    def from_generic_json(cls, data: Any) -> Resource:
        """Rebuild a resource from a decoded HAL document.

        ``_links`` and ``_embedded`` accept both the single object and the
        array form of a relation. Every other member becomes state.
        """
        if not isinstance(data, Mapping):
            raise TypeMismatch(None, "object", data)
        resource = cls()
        for key, member in data.items():
            if key == LINKS_KEY:
                for rel, item in _relations(key, member):
                    resource = resource.add_link(rel, Link.from_generic_json(item))
            elif key == EMBEDDED_KEY:
                for rel, item in _relations(key, member):
                    resource = resource.add_resource(rel, cls.from_generic_json(item))
            else:
                resource = resource.add_state(key, member)
        logger.debug(
            "Rebuilt resource with %d state fields, %d link relations, %d embedded relations",
            len(resource._state),
            len(resource._links),
            len(resource._embedded),
        )
        return resource

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return (
            self._state == other._state
            and self._links == other._links
            and self._embedded == other._embedded
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Resource(state={self._state!r}, links={self._links!r}, "
            f"embedded={self._embedded!r})"
        )


def _sorted(mapping: dict[str, Any]) -> dict[str, Any]:
    return {key: mapping[key] for key in sorted(mapping)}


def _relations(section: str, member: Any) -> list[tuple[str, Any]]:
    if not isinstance(member, Mapping):
        raise TypeMismatch(section, "object", member)
    pairs: list[tuple[str, Any]] = []
    for rel, entry in member.items():
        if isinstance(entry, list):
            pairs.extend((rel, item) for item in entry)
        else:
            pairs.append((rel, entry))
    return pairs
