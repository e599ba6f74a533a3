"""Offset/limit pagination for HAL collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from fastapi_hal.config import HALSettings, settings as default_settings
from fastapi_hal.core.link import Link
from fastapi_hal.core.resource import Resource, ToResource

from .base import PaginationBase


class StandardPagination(PaginationBase):
    """Pagination driven by ``offset`` and ``limit`` query parameters."""

    def __init__(
        self,
        limit: int | None = None,
        max_limit: int | None = None,
        *,
        settings: HALSettings | None = None,
    ) -> None:
        settings = settings or default_settings
        self.default_limit = limit or settings.default_page_limit
        self.max_limit = max_limit or settings.max_page_limit

    def normalize(self, offset: int | None, limit: int | None) -> tuple[int, int]:
        """Clamp offset to zero or more and limit to 1..max_limit."""
        offset = max(0, offset or 0)
        if limit is None or limit < 1:
            limit = self.default_limit
        return offset, min(limit, self.max_limit)

    def paginate(self, items: Sequence[Any], *, offset: int, limit: int) -> list[Any]:
        """Slice ``items`` to the requested page."""
        offset, limit = self.normalize(offset, limit)
        return list(items[offset : offset + limit])

    def get_links(
        self, base_url: str, *, total: int, offset: int, limit: int
    ) -> dict[str, Link]:
        """Build self/first/last and, where they exist, prev/next links."""
        offset, limit = self.normalize(offset, limit)
        split = urlsplit(base_url)
        query = [
            (key, value)
            for key, value in parse_qsl(split.query, keep_blank_values=True)
            if key not in {"offset", "limit"}
        ]

        def build_url(page_offset: int) -> str:
            page_query = urlencode([*query, ("offset", page_offset), ("limit", limit)])
            return urlunsplit((split.scheme, split.netloc, split.path, page_query, split.fragment))

        last_offset = max(0, (max(total - 1, 0) // limit) * limit)
        links = {
            "self": Link(build_url(offset)),
            "first": Link(build_url(0)),
            "last": Link(build_url(last_offset)),
        }
        prev_offset = offset - limit
        if offset > 0:
            links["prev"] = Link(build_url(max(prev_offset, 0)))
        next_offset = offset + limit
        if next_offset <= last_offset:
            links["next"] = Link(build_url(next_offset))
        return links

    def get_state(self, *, total: int, offset: int, limit: int) -> dict[str, Any]:
        """Build page state with total, limit, and offset."""
        offset, limit = self.normalize(offset, limit)
        return {"total": total, "limit": limit, "offset": offset}

    def build_page(
        self,
        items: Sequence[Union[Resource, ToResource]],
        *,
        rel: str,
        base_url: str,
        total: int | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> Resource:
        """Return a collection resource for one page of ``items``.

        When ``total`` is omitted, ``items`` is the whole collection and is
        sliced here; otherwise ``items`` is taken to be the page already.
        """
        offset, limit = self.normalize(offset, limit)
        if total is None:
            total = len(items)
            items = self.paginate(items, offset=offset, limit=limit)
        page = Resource()
        for rel_name, link in self.get_links(
            base_url, total=total, offset=offset, limit=limit
        ).items():
            page = page.add_link(rel_name, link)
        for key, value in self.get_state(total=total, offset=offset, limit=limit).items():
            page = page.add_state(key, value)
        for item in items:
            page = page.add_resource(rel, item)
        return page
