"""Catalog lookups: trending feed, identity resolution and detail records.

Errors from these calls are never absorbed here; callers receive the
provider's ConfigError, TransportError, DecodeError or NotFoundError as-is.
"""

from __future__ import annotations

from typing import cast

from reelscout.providers import get_connector
from reelscout.providers.observability import provider_monitor
from reelscout.providers.omdb import OMDBConnector
from reelscout.providers.tmdb import TMDBConnector
from reelscout.schema.catalog import CatalogItem, MediaKind, TrendingWindow
from reelscout.schema.details import DetailRecord


def _tmdb(connector: TMDBConnector | None) -> TMDBConnector:
    return connector or cast(TMDBConnector, get_connector("tmdb"))


def _omdb(connector: OMDBConnector | None) -> OMDBConnector:
    return connector or cast(OMDBConnector, get_connector("omdb"))


async def list_trending(
    window: TrendingWindow = TrendingWindow.WEEK, *, connector: TMDBConnector | None = None
) -> list[CatalogItem]:
    """Return this window's trending movies and TV shows."""
    tmdb = _tmdb(connector)
    return await provider_monitor.track(
        tmdb.source_name,
        "trending",
        lambda: tmdb.fetch_trending(window),
        context={"window": TrendingWindow(window).value},
    )


async def resolve_external_id(
    catalog_id: int, media_kind: MediaKind, *, connector: TMDBConnector | None = None
) -> str:
    """Map a catalog entry to its IMDb id."""
    tmdb = _tmdb(connector)
    return await provider_monitor.track(
        tmdb.source_name,
        "external_ids",
        lambda: tmdb.fetch_external_id(catalog_id, media_kind),
        context={"catalog_id": catalog_id, "media_kind": MediaKind(media_kind).value},
    )


async def fetch_details(external_id: str, *, connector: OMDBConnector | None = None) -> DetailRecord:
    omdb = _omdb(connector)
    return await provider_monitor.track(
        omdb.source_name,
        "fetch",
        lambda: omdb.fetch(external_id),
        context={"external_id": external_id},
    )
