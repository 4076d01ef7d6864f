"""Streaming availability resolution and normalization."""

from __future__ import annotations

from typing import Iterable, cast

from reelscout.core.config import settings
from reelscout.providers import get_connector
from reelscout.providers.observability import provider_monitor
from reelscout.providers.watchmode import WatchmodeConnector
from reelscout.schema.streaming import StreamingSource


def _watchmode(connector: WatchmodeConnector | None) -> WatchmodeConnector:
    return connector or cast(WatchmodeConnector, get_connector("watchmode"))


def normalize_sources(sources: Iterable[StreamingSource], region: str | None = None) -> list[StreamingSource]:
    """Keep one offer per service name for the target region, sorted by name.

    The first offer seen for a name wins, so upstream order decides which
    offer type survives. Names compare case-sensitively.
    """
    target = region or settings.streaming_region
    seen: set[str] = set()
    unique: list[StreamingSource] = []
    for source in sources:
        if source.region != target or source.name in seen:
            continue
        seen.add(source.name)
        unique.append(source)
    return sorted(unique, key=lambda source: source.name)


async def lookup_provider_title_id(external_id: str, *, connector: WatchmodeConnector | None = None) -> int:
    watchmode = _watchmode(connector)
    return await provider_monitor.track(
        watchmode.source_name,
        "lookup",
        lambda: watchmode.lookup_title_id(external_id),
        context={"external_id": external_id},
    )


async def fetch_sources(title_id: int, *, connector: WatchmodeConnector | None = None) -> list[StreamingSource]:
    watchmode = _watchmode(connector)
    return await provider_monitor.track(
        watchmode.source_name,
        "sources",
        lambda: watchmode.fetch_sources(title_id),
        context={"title_id": title_id},
    )


async def resolve_sources(
    external_id: str,
    *,
    region: str | None = None,
    connector: WatchmodeConnector | None = None,
) -> list[StreamingSource]:
    """Resolve and normalize the streaming offers for an IMDb id.

    Errors propagate; best-effort callers go through
    ``title_service.load_sources``.
    """
    title_id = await lookup_provider_title_id(external_id, connector=connector)
    sources = await fetch_sources(title_id, connector=connector)
    return normalize_sources(sources, region)
