from __future__ import annotations

import logging
from typing import Any

import httpx

from reelscout.core.config import settings
from reelscout.utils.redaction import redact_params, redact_secrets

logger = logging.getLogger("reelscout.providers.http")


class ExternalAPIError(Exception):
    """Base class for failures talking to an upstream provider."""


class ConfigError(ExternalAPIError):
    """A provider credential required for the call is not configured."""


class TransportError(ExternalAPIError):
    """The request could not be completed or the provider answered with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ExternalAPIError):
    """The response body does not match the expected schema."""


class NotFoundError(ExternalAPIError):
    """The provider answered well-formed but reported the resource as absent."""


async def fetch_json(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """GET a JSON document, translating transport and decoding failures.

    A single attempt is made. HTTP 404 maps to NotFoundError, any other
    non-success status to TransportError.
    """
    logger.debug("GET %s params=%s", url, redact_params(params))
    try:
        if client is not None:
            response = await client.get(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as owned_client:
                response = await owned_client.get(url, params=params, headers=headers)
    except httpx.HTTPError as exc:
        raise TransportError(redact_secrets(f"Request to {url} failed: {exc}")) from exc

    if response.status_code == 404:
        raise NotFoundError(f"Resource not found at {url}")
    if response.status_code >= 400:
        raise TransportError(
            f"{url} responded with HTTP {response.status_code}",
            status_code=response.status_code,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(f"{url} returned a non-JSON body") from exc
