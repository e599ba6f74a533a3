"""Router returning HAL responses from resource endpoints."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from typing import Any

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from fastapi_hal.config import HALSettings, settings as default_settings
from fastapi_hal.responses import HALJSONResponse


class HALRouter(APIRouter):
    """APIRouter whose resource endpoints return ``Resource`` objects."""

    def __init__(self, *args: Any, hal_settings: HALSettings | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("default_response_class", HALJSONResponse)
        super().__init__(*args, **kwargs)
        self.hal_settings = hal_settings or default_settings

    def resource(
        self,
        path: str,
        *,
        methods: Sequence[str] = ("GET",),
        status_code: int = 200,
        **route_kwargs: Any,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an endpoint returning a resource or ``ToResource`` value.

        Examples:
            router = HALRouter(prefix="/orders")

            @router.resource("/{order_id}")
            def get_order(order_id: int) -> Resource:
                return Resource.with_self(f"/orders/{order_id}")
        """

        def decorator(endpoint: Callable[..., Any]) -> Callable[..., Any]:
            self.add_api_route(
                path,
                self._wrap(endpoint, status_code),
                methods=list(methods),
                status_code=status_code,
                response_class=HALJSONResponse,
                response_model=None,
                **route_kwargs,
            )
            return endpoint

        return decorator

    def _wrap(self, endpoint: Callable[..., Any], status_code: int) -> Callable[..., Any]:
        is_coroutine = inspect.iscoroutinefunction(endpoint)

        async def wrapper(*args: Any, **kwargs: Any) -> Response:
            if is_coroutine:
                result = await endpoint(*args, **kwargs)
            else:
                result = await run_in_threadpool(endpoint, *args, **kwargs)
            if isinstance(result, Response):
                return result
            return HALJSONResponse(result, status_code=status_code, settings=self.hal_settings)

        wrapper.__name__ = endpoint.__name__
        wrapper.__qualname__ = endpoint.__qualname__
        wrapper.__doc__ = endpoint.__doc__
        # Annotations are resolved against the endpoint's own module.
        wrapper.__signature__ = inspect.signature(endpoint, eval_str=True)  # type: ignore[attr-defined]
        return wrapper
