"""Pagination base class for HAL collection resources."""

from collections.abc import Sequence
from typing import Any

from fastapi_hal.core.link import Link


class PaginationBase:
    """Define pagination API for HAL collections."""

    def paginate(self, items: Sequence[Any], *, offset: int, limit: int) -> list[Any]:
        """Return a paginated slice of items."""
        raise NotImplementedError

    def get_links(
        self, base_url: str, *, total: int, offset: int, limit: int
    ) -> dict[str, Link]:
        """Return page links keyed by relation."""
        raise NotImplementedError

    def get_state(self, *, total: int, offset: int, limit: int) -> dict[str, Any]:
        """Return page state (total, limit, offset, etc.)."""
        raise NotImplementedError
