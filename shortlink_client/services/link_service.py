from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import pydantic

from shortlink_client.api import endpoints
from shortlink_client.api.client import APIClient
from shortlink_client.errors import APIError, ValidationError
from shortlink_client.schemas.link import Link, LinkStats
from shortlink_client.services.error_messages import normalize_error
from shortlink_client.services.validators import is_valid_url, validate_short_code

LINK_ERROR_FALLBACK = "An error occurred while processing your request"

LinkId = Union[int, str]
ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def _parse(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a 2xx body; a malformed one is reported like any other failure."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise APIError(LINK_ERROR_FALLBACK, payload=data) from e


def changed_fields(
    link: Link,
    original_url: Optional[str] = None,
    short_code: Optional[str] = None
) -> Dict[str, str]:
    """
    Build a partial update payload from an edit form.

    Only values that differ from the link's current ones are included,
    keyed by their wire names. An empty dict means nothing changed.
    """
    fields: Dict[str, str] = {}

    if original_url is not None and original_url != link.original_url:
        fields["originalUrl"] = original_url

    if short_code is not None and short_code != link.short_code:
        fields["customShortCode"] = short_code

    return fields


class LinkService:
    """CRUD for the signed-in user's links."""

    def __init__(self, client: APIClient):
        self.client = client

    async def get_links(self) -> List[Link]:
        try:
            data = await self.client.get(endpoints.LINKS)
        except APIError as e:
            raise normalize_error(e, LINK_ERROR_FALLBACK) from e
        if data is None:
            return []
        if not isinstance(data, list):
            raise APIError(LINK_ERROR_FALLBACK, payload=data)
        return [_parse(Link, item) for item in data]

    async def create_link(
        self,
        original_url: str,
        custom_short_code: Optional[str] = None
    ) -> Link:
        """
        Shorten a URL.

        ``customShortCode`` is left out of the request entirely when not
        given, so the server applies its own generation policy.

        Raises:
            ValidationError: URL or short code rejected before dispatch
        """
        if not is_valid_url(original_url):
            raise ValidationError("Please enter a valid URL (http:// or https://)")

        is_valid, message = validate_short_code(custom_short_code)
        if not is_valid:
            raise ValidationError(message)

        payload: Dict[str, Any] = {"originalUrl": original_url}
        if custom_short_code:
            payload["customShortCode"] = custom_short_code

        try:
            data = await self.client.post(endpoints.LINKS, json=payload)
        except APIError as e:
            raise normalize_error(e, LINK_ERROR_FALLBACK) from e
        return _parse(Link, data)

    async def update_link(self, link_id: LinkId, fields: Dict[str, Any]) -> Link:
        """Send a partial update (see ``changed_fields``) and return the confirmed link"""
        if "originalUrl" in fields and not is_valid_url(fields["originalUrl"]):
            raise ValidationError("Please enter a valid URL (http:// or https://)")

        if "customShortCode" in fields:
            if not fields["customShortCode"]:
                raise ValidationError("Short code is required")
            is_valid, message = validate_short_code(fields["customShortCode"])
            if not is_valid:
                raise ValidationError(message)

        try:
            data = await self.client.put(endpoints.link_by_id(link_id), json=fields)
        except APIError as e:
            raise normalize_error(e, LINK_ERROR_FALLBACK) from e
        return _parse(Link, data)

    async def delete_link(self, link_id: LinkId) -> bool:
        try:
            await self.client.delete(endpoints.link_by_id(link_id))
        except APIError as e:
            raise normalize_error(e, LINK_ERROR_FALLBACK) from e
        return True

    async def get_link_stats(self, link_id: LinkId) -> LinkStats:
        try:
            data = await self.client.get(endpoints.link_stats(link_id))
        except APIError as e:
            raise normalize_error(e, LINK_ERROR_FALLBACK) from e
        return _parse(LinkStats, data or {})

    def get_short_url(self, short_code: str) -> str:
        return self.client.short_url(short_code)
