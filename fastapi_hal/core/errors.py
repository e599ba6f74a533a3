"""vnd.error documents expressed as HAL resources."""

from typing import Any

from fastapi_hal.core.link import Link
from fastapi_hal.core.resource import Resource


class HALErrorBuilder:
    """Build ``application/vnd.error+json`` error resources."""

    def error_resource(
        self,
        *,
        message: str,
        logref: str | int | None = None,
        path: str | None = None,
        help_href: str | None = None,
        about_href: str | None = None,
        describes_href: str | None = None,
    ) -> Resource:
        """Return an error resource."""
        if not message:
            raise ValueError("Error resource must include a message.")
        resource = Resource().add_state("message", message)
        if logref is not None:
            resource = resource.add_state("logref", logref)
        if path is not None:
            resource = resource.add_state("path", path)
        if help_href is not None:
            resource = resource.add_link("help", Link(help_href))
        if about_href is not None:
            resource = resource.add_link("about", Link(about_href))
        if describes_href is not None:
            resource = resource.add_link("describes", Link(describes_href))
        return resource

    def error_collection(self, errors: list[Resource], *, total: int | None = None) -> Resource:
        """Return a resource embedding several errors under ``errors``."""
        resource = Resource().add_state("total", len(errors) if total is None else total)
        for error in errors:
            resource = resource.add_resource("errors", error)
        return resource

    def error_document(self, **fields: Any) -> dict[str, Any]:
        """Return a single error as plain JSON data."""
        return self.error_resource(**fields).to_generic_json()
