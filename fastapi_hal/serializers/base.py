"""Base serializer turning SQLAlchemy models into HAL resources."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from fastapi_hal.core.link import Link
from fastapi_hal.core.resource import Resource

logger = logging.getLogger(__name__)


class HALSerializer:
    """Serialize a SQLAlchemy model instance into a HAL resource."""

    class Meta:
        """Serializer metadata (collection path, model, fields, embedded relationships)."""

        path: str = ""
        model: Any = None
        fields: list[str] = []
        embedded: dict[str, type[HALSerializer]] = {}

    def __init__(self, instance: Any, *, base_url: str = "") -> None:
        self.instance = instance
        self.base_url = base_url.rstrip("/")

    @classmethod
    def many(cls, instances: Iterable[Any], *, base_url: str = "") -> list[Resource]:
        """Serialize a collection of instances."""
        return [cls(instance, base_url=base_url).to_resource() for instance in instances]

    def to_resource(self) -> Resource:
        """Build the resource for the bound instance."""
        resource = Resource.with_self(self.self_href())
        for key, value in self.get_state().items():
            resource = resource.add_state(key, value)
        for rel, link in self.get_links():
            resource = resource.add_link(rel, link)
        for rel, child in self.get_embedded():
            resource = resource.add_resource(rel, child)
        return resource

    def get_id(self) -> str:
        """Return the resource id as a string."""
        value = getattr(self.instance, "id", None)
        return "" if value is None else str(value)

    def self_href(self) -> str:
        path = self.Meta.path.rstrip("/")
        return f"{self.base_url}{path}/{self.get_id()}"

    def get_state(self) -> dict[str, Any]:
        """Return state fields from ``Meta.fields`` or the mapped columns."""
        if self.Meta.fields:
            names = [name for name in self.Meta.fields if name != "id"]
        else:
            mapper = inspect(self.instance.__class__)
            names = [attr.key for attr in mapper.column_attrs if attr.key != "id"]
        return {name: self.serialize_field(getattr(self.instance, name)) for name in names}

    def serialize_field(self, value: Any) -> Any:
        """Convert column values that have no direct state representation."""
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, Decimal):
            return float(value)
        return value

    def get_links(self) -> list[tuple[str, Link]]:
        """Return links for relationships that are not embedded."""
        links: list[tuple[str, Link]] = []
        for relationship in inspect(self.instance.__class__).relationships:
            if relationship.key in self.Meta.embedded and self._is_loaded(relationship.key):
                continue
            links.append((relationship.key, Link(f"{self.self_href()}/{relationship.key}")))
        return links

    def get_embedded(self) -> list[tuple[str, Resource]]:
        """Return embedded resources for configured, already loaded relationships."""
        embedded: list[tuple[str, Resource]] = []
        mapper = inspect(self.instance.__class__)
        for key, serializer_class in self.Meta.embedded.items():
            relationship = mapper.relationships.get(key)
            if relationship is None or not self._is_loaded(key):
                logger.debug("Skipping relationship %s: not mapped or not loaded", key)
                continue
            related = getattr(self.instance, key)
            if related is None:
                continue
            items = related if relationship.uselist else [related]
            for item in items:
                embedded.append(
                    (key, serializer_class(item, base_url=self.base_url).to_resource())
                )
        return embedded

    def _is_loaded(self, key: str) -> bool:
        state = inspect(self.instance)
        return state.attrs[key].loaded_value is not NO_VALUE
