from __future__ import annotations

import logging
from typing import Any

import httpx

from reelscout.core.config import settings
from reelscout.providers.base import BaseConnector
from reelscout.providers.http import ConfigError, DecodeError, NotFoundError
from reelscout.schema.catalog import CatalogItem, ExternalIds, MediaKind, TrendingWindow

API_BASE = "https://api.themoviedb.org/3"
RESOLVABLE_KINDS = {kind.value for kind in MediaKind}

logger = logging.getLogger("reelscout.providers.tmdb")


class TMDBConnector(BaseConnector):
    """Catalog provider: trending feed and catalog id -> IMDb id bridging."""
    source_name = "tmdb"
    key_setting = "TMDB_API_AUTH_HEADER or TMDB_API_KEY"

    def __init__(
        self,
        api_key: str | None = None,
        auth_token: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(api_key or settings.tmdb_api_key, client)
        self.auth_token = auth_token or settings.tmdb_api_auth_header

    def _auth(self) -> tuple[dict[str, str], dict[str, str]]:
        headers: dict[str, str] = {"accept": "application/json"}
        params: dict[str, str] = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        elif self.api_key:
            params["api_key"] = self.api_key
        else:
            raise ConfigError("TMDB API credentials missing; set TMDB_API_AUTH_HEADER or TMDB_API_KEY")
        return headers, params

    async def fetch_trending(self, window: TrendingWindow = TrendingWindow.WEEK) -> list[CatalogItem]:
        headers, params = self._auth()
        payload = await self.get_json(
            f"{API_BASE}/trending/all/{TrendingWindow(window).value}", headers=headers, params=params
        )
        if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
            raise DecodeError("tmdb returned an unexpected trending payload: missing results")
        entries: list[dict[str, Any]] = []
        skipped = 0
        for entry in payload["results"]:
            if isinstance(entry, dict) and entry.get("media_type") in RESOLVABLE_KINDS:
                entries.append(entry)
            else:
                skipped += 1
        if skipped:
            logger.debug("Skipped %d trending entries without a movie/tv media type", skipped)
        return self.decode(list[CatalogItem], entries, what="trending")

    async def fetch_external_id(self, catalog_id: int, media_kind: MediaKind) -> str:
        headers, params = self._auth()
        kind = MediaKind(media_kind).value
        payload = await self.get_json(
            f"{API_BASE}/{kind}/{int(catalog_id)}/external_ids", headers=headers, params=params
        )
        external_ids = self.decode(ExternalIds, payload, what="external_ids")
        imdb_id = (external_ids.imdb_id or "").strip()
        if not imdb_id:
            raise NotFoundError(f"IMDb id not available for {kind} {catalog_id}")
        return imdb_id
