import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.config import Settings
from app.services.errors import (
    ConfigurationMissing,
    DecodeError,
    HttpError,
    NetworkError,
    ShapeMismatch,
)

logger = logging.getLogger(__name__)

TIMEOUT = 10  # seconds
DEFAULT_POPULATE = "*"

M = TypeVar("M", bound=BaseModel)


def _build_headers(settings: Settings) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.cms_api_token:
        headers["Authorization"] = f"Bearer {settings.cms_api_token}"
    return headers


async def fetch_resource(
    settings: Settings,
    resource: str,
    locale: str,
    params: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """GET ``{base}/api/{resource}`` with every relation populated and return the JSON body.

    A single attempt is made: there is no retry and no backoff.

    Raises:
        ConfigurationMissing: if no CMS base URL is configured.
        NetworkError: on connection errors and timeouts.
        HttpError: on a non-2xx response.
        DecodeError: if the body is not a JSON object.
    """
    if not settings.cms_api_url:
        raise ConfigurationMissing("STRAPI_API_URL is not set")

    url = f"{settings.cms_api_url}/api/{resource}"
    query = {"populate": DEFAULT_POPULATE, "locale": locale}
    if params:
        query.update(params)

    async with httpx.AsyncClient(timeout=TIMEOUT, transport=transport) as client:
        try:
            response = await client.get(url, params=query, headers=_build_headers(settings))
        except httpx.RequestError as exc:
            raise NetworkError(f"{type(exc).__name__} requesting {url}: {exc}") from exc

    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase)

    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object from {url}, got {type(payload).__name__}")

    logger.debug("CMS fetch ok", extra={"resource": resource, "locale": locale})
    return payload


def parse_payload(payload: Dict[str, Any], schema: Type[M]) -> M:
    """Validate a decoded CMS response against *schema*.

    Raises:
        ShapeMismatch: if required fields are missing or have the wrong type.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(loc) for loc in first["loc"])
        raise ShapeMismatch(
            f"{schema.__name__}: {exc.error_count()} validation error(s), first at {location}: {first['msg']}"
        ) from exc
