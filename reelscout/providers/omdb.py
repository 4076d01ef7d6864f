from __future__ import annotations

from typing import Any

import httpx

from reelscout.core.config import settings
from reelscout.providers.base import BaseConnector
from reelscout.providers.http import DecodeError, NotFoundError
from reelscout.schema.details import DetailRecord, SearchPage, SearchSummary

API_URL = "https://www.omdbapi.com/"


class OMDBConnector(BaseConnector):
    """Detail provider: title search and full detail records by IMDb id.

    The provider answers HTTP 200 for misses and flags them with
    ``Response: "False"`` plus an ``Error`` message.
    """
    source_name = "omdb"
    key_setting = "OMDB_API_KEY"

    def __init__(self, api_key: str | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(api_key or settings.omdb_api_key, client)

    async def _query(self, params: dict[str, str]) -> dict[str, Any]:
        payload = await self.get_json(API_URL, params={**params, "apikey": self.require_key()})
        if not isinstance(payload, dict):
            raise DecodeError("omdb returned an unexpected payload: not an object")
        return payload

    @staticmethod
    def _is_negative(payload: dict[str, Any]) -> bool:
        return str(payload.get("Response", "")).lower() == "false"

    async def search(self, query: str) -> list[SearchSummary]:
        payload = await self._query({"s": query})
        if self._is_negative(payload):
            reason = payload.get("Error") or "no results"
            raise NotFoundError(f"No titles found for '{query}' ({reason})")
        if "Search" not in payload:
            raise DecodeError("omdb returned an unexpected search payload: missing Search")
        page = self.decode(SearchPage, payload, what="search")
        return list(page.results)

    async def fetch(self, identifier: str) -> DetailRecord:
        external_id = self.parse_identifier(identifier)
        payload = await self._query({"i": external_id, "plot": "short"})
        if self._is_negative(payload):
            reason = payload.get("Error") or "not found"
            raise NotFoundError(f"No record for {external_id} ({reason})")
        return self.decode(DetailRecord, payload, what="detail")
