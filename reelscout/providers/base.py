"""Base connector primitives for upstream metadata providers."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from reelscout.providers.http import ConfigError, DecodeError, fetch_json

T = TypeVar("T")


class BaseConnector:
    """Shared plumbing for provider connectors.

    Connectors hold a single API key and an optional shared HTTP client. The
    key is checked lazily so a missing credential only disables the provider
    that needs it.
    """
    source_name: str
    key_setting: str = ""

    def __init__(self, api_key: str | None = None, client: httpx.AsyncClient | None = None) -> None:
        self.api_key = api_key
        self.client = client

    def parse_identifier(self, identifier: str) -> str:
        """Normalize external identifiers before lookup."""
        return identifier.strip()

    def require_key(self) -> str:
        if not self.api_key:
            raise ConfigError(f"{self.source_name} API key missing; set {self.key_setting}")
        return self.api_key

    async def get_json(
        self, url: str, *, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await fetch_json(url, params=params, headers=headers, client=self.client)

    def decode(self, schema: type[T] | Any, payload: Any, *, what: str) -> T:
        """Validate a payload against a schema, raising DecodeError on mismatch."""
        try:
            return TypeAdapter(schema).validate_python(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"{self.source_name} returned an unexpected {what} payload: {exc.error_count()} error(s)"
            ) from exc
