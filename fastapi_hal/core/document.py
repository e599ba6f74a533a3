"""HAL document construction."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Union

from fastapi_hal.core.resource import (
    CURIES_REL,
    EMBEDDED_KEY,
    LINKS_KEY,
    Resource,
    to_resource,
)

if TYPE_CHECKING:
    from fastapi_hal.core.link import Link
    from fastapi_hal.core.resource import ToResource


class HALDocumentBuilder:
    """Build HAL documents from resources.

    A relation holding exactly one link or embedded resource is rendered as
    a single object, any other count as an array. ``curies`` is always an
    array. Empty ``_links``/``_embedded`` sections are left out.
    """

    def build(self, resource: Resource) -> dict[str, Any]:
        """Return the HAL document for ``resource`` with keys in lexicographic order."""
        document: dict[str, Any] = {}
        for key, value in resource.state.items():
            document[key] = value.to_json()
        # Reserved sections win over state fields of the same name.
        if resource.links:
            document[LINKS_KEY] = self.build_links(resource.links)
        if resource.embedded:
            document[EMBEDDED_KEY] = self.build_embedded(resource.embedded)
        return {key: document[key] for key in sorted(document)}

    def build_links(self, links: Mapping[str, Sequence[Link]]) -> dict[str, Any]:
        """Return the ``_links`` section."""
        section: dict[str, Any] = {}
        for rel in sorted(links):
            objects = [link.to_generic_json() for link in links[rel]]
            if len(objects) == 1 and rel != CURIES_REL:
                section[rel] = objects[0]
            else:
                section[rel] = objects
        return section

    def build_embedded(self, embedded: Mapping[str, Sequence[Resource]]) -> dict[str, Any]:
        """Return the ``_embedded`` section."""
        section: dict[str, Any] = {}
        for rel in sorted(embedded):
            objects = [self.build(child) for child in embedded[rel]]
            section[rel] = objects[0] if len(objects) == 1 else objects
        return section


def render(
    resource: Union[Resource, ToResource],
    *,
    indent: int | None = None,
    ensure_ascii: bool = False,
) -> str:
    """Encode a resource as HAL JSON text, compact unless ``indent`` is given."""
    document = to_resource(resource).to_generic_json()
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        document, indent=indent, ensure_ascii=ensure_ascii, separators=separators
    )


def parse(text: str | bytes) -> Resource:
    """Decode HAL JSON text into a resource."""
    return Resource.from_generic_json(json.loads(text))
