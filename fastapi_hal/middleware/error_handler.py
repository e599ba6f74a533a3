"""HAL error handling middleware."""

from __future__ import annotations

import logging
from typing import Any

from fastapi_hal.config import HALSettings, settings as default_settings
from fastapi_hal.core.errors import HALErrorBuilder
from fastapi_hal.exceptions import HALError
from fastapi_hal.responses import HALJSONResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into vnd.error documents."""

    def __init__(self, app: Any, settings: HALSettings | None = None) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.settings = settings or default_settings
        self.error_builder = HALErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize vnd.error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except HALError as exc:
            if response_started:
                raise
            logger.info("Rejected malformed HAL input: %s", exc.message)
            await self._respond(scope, receive, send, status_code=400, message=exc.message)
        except Exception as exc:
            if response_started:
                raise
            logger.exception("Unhandled error while serving %s", scope.get("path", ""))
            message = str(exc) if self.settings.include_error_detail else "Internal Server Error"
            await self._respond(scope, receive, send, status_code=500, message=message)

    async def _respond(
        self, scope: dict[str, Any], receive: Any, send: Any, *, status_code: int, message: str
    ) -> None:
        error = self.error_builder.error_resource(
            message=message or "Error", logref=status_code, path=scope.get("path")
        )
        response = HALJSONResponse(
            error,
            status_code=status_code,
            media_type=self.settings.error_media_type,
            settings=self.settings,
        )
        await response(scope, receive, send)
