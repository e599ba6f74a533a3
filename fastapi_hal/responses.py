"""Starlette responses carrying HAL documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from starlette.background import BackgroundTask
from starlette.responses import JSONResponse

from fastapi_hal.config import HALSettings, settings as default_settings
from fastapi_hal.core.resource import Resource, ToResource


class HALJSONResponse(JSONResponse):
    """JSON response rendering resources as ``application/hal+json``."""

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        settings: HALSettings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        super().__init__(
            content,
            status_code=status_code,
            headers=headers,
            media_type=media_type or self.settings.media_type,
            background=background,
        )

    def render(self, content: Any) -> bytes:
        """Encode a resource, a ``ToResource`` implementer or prebuilt JSON data."""
        if isinstance(content, Resource):
            document = content.to_generic_json()
        elif isinstance(content, ToResource):
            document = content.to_resource().to_generic_json()
        else:
            document = content
        indent = self.settings.indent
        return json.dumps(
            document,
            ensure_ascii=self.settings.ensure_ascii,
            allow_nan=False,
            indent=indent,
            separators=(",", ":") if indent is None else (",", ": "),
        ).encode("utf-8")
