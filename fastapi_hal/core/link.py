"""HAL link objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fastapi_hal.exceptions import MalformedHref, MissingRequiredField, TypeMismatch

_EXPECTED_TYPES = {"templated": "boolean"}


class Link(BaseModel):
    """A link relation target with optional HAL link attributes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    href: str
    templated: Optional[bool] = None
    media_type: Optional[str] = Field(default=None, alias="type")
    deprecation: Optional[str] = None
    name: Optional[str] = None
    profile: Optional[str] = None
    title: Optional[str] = None
    hreflang: Optional[str] = None

    def __init__(self, href: str, **attributes: Any) -> None:
        super().__init__(href=href, **attributes)

    @classmethod
    def new(cls, href: str) -> Link:
        """Return a link to ``href`` with no optional attributes."""
        return cls(href)

    def with_templated(self, templated: bool) -> Link:
        """Return a copy marking ``href`` as a URI template."""
        return self.model_copy(update={"templated": templated})

    def with_media_type(self, media_type: str) -> Link:
        """Return a copy with the expected media type (emitted as ``type``)."""
        return self.model_copy(update={"media_type": media_type})

    def with_deprecation(self, deprecation: str) -> Link:
        """Return a copy with a URL describing the link's deprecation."""
        return self.model_copy(update={"deprecation": deprecation})

    def with_name(self, name: str) -> Link:
        """Return a copy with a secondary key for selecting among same-relation links."""
        return self.model_copy(update={"name": name})

    def with_profile(self, profile: str) -> Link:
        """Return a copy with a profile URI."""
        return self.model_copy(update={"profile": profile})

    def with_title(self, title: str) -> Link:
        """Return a copy with a human-readable title."""
        return self.model_copy(update={"title": title})

    def with_hreflang(self, hreflang: str) -> Link:
        """Return a copy with the target's language tag."""
        return self.model_copy(update={"hreflang": hreflang})

    def to_generic_json(self) -> dict[str, Any]:
        """Return the link object with keys in lexicographic order."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: data[key] for key in sorted(data)}

    @classmethod
    def from_generic_json(cls, data: Any) -> Link:
        """Rebuild a link from its JSON object form.

        Raises:
            MissingRequiredField: ``href`` is absent.
            MalformedHref: ``href`` is not a string.
            TypeMismatch: the input is not an object or a member has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise TypeMismatch("link", "object", data)
        # Validation goes through __init__, which needs href positionally.
        if "href" not in data:
            raise MissingRequiredField("href")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            if field == "href":
                raise MalformedHref(error.get("input")) from None
            expected = _EXPECTED_TYPES.get(field or "", "string")
            raise TypeMismatch(field, expected, error.get("input")) from None
