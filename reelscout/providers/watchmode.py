from __future__ import annotations

import httpx

from reelscout.core.config import settings
from reelscout.providers.base import BaseConnector
from reelscout.providers.http import NotFoundError
from reelscout.schema.streaming import StreamingSource, TitleSearch

API_BASE = "https://api.watchmode.com/v1"


class WatchmodeConnector(BaseConnector):
    """Streaming provider: IMDb id -> title id lookup and per-title offers."""
    source_name = "watchmode"
    key_setting = "WATCHMODE_API_KEY"

    def __init__(self, api_key: str | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(api_key or settings.watchmode_api_key, client)

    async def lookup_title_id(self, identifier: str) -> int:
        """Return the provider title id of the first match for an IMDb id."""
        external_id = self.parse_identifier(identifier)
        payload = await self.get_json(
            f"{API_BASE}/search/",
            params={
                "apiKey": self.require_key(),
                "search_field": "imdb_id",
                "search_value": external_id,
            },
        )
        matches = self.decode(TitleSearch, payload, what="search").title_results
        if not matches:
            raise NotFoundError(f"No watchmode title found for {external_id}")
        return matches[0].id

    async def fetch_sources(self, title_id: int) -> list[StreamingSource]:
        payload = await self.get_json(
            f"{API_BASE}/title/{int(title_id)}/sources/",
            params={"apiKey": self.require_key()},
        )
        return self.decode(list[StreamingSource], payload, what="sources")
