"""Single-title aggregation: detail record plus best-effort streaming offers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from reelscout.providers.omdb import OMDBConnector
from reelscout.providers.tmdb import TMDBConnector
from reelscout.providers.watchmode import WatchmodeConnector
from reelscout.schema.catalog import CatalogItem
from reelscout.schema.details import DetailRecord
from reelscout.schema.streaming import StreamingSource
from reelscout.services import availability_service, catalog_service
from reelscout.utils.redaction import redact_secrets

logger = logging.getLogger("reelscout.services.title")


@dataclass(slots=True)
class TitleView:
    record: DetailRecord
    sources: list[StreamingSource] = field(default_factory=list)


async def load_sources(
    external_id: str, *, connector: WatchmodeConnector | None = None
) -> list[StreamingSource]:
    """Return normalized streaming offers, or an empty list on any failure."""
    try:
        return await availability_service.resolve_sources(external_id, connector=connector)
    except Exception as exc:  # noqa: BLE001
        payload = {
            "event": "sources_unavailable",
            "external_id": external_id,
            "error_kind": type(exc).__name__,
            "error": redact_secrets(str(exc)),
        }
        logger.info(json.dumps(payload))
        return []


async def load_single_title(
    source: CatalogItem | DetailRecord,
    *,
    tmdb: TMDBConnector | None = None,
    omdb: OMDBConnector | None = None,
    watchmode: WatchmodeConnector | None = None,
) -> TitleView:
    """Build the unified view for a trending entry or an already hydrated record.

    A DetailRecord skips identity resolution and the detail fetch. For a
    CatalogItem both run in order and their errors abort the load. Streaming
    lookup always runs last and never fails the load.
    """
    if isinstance(source, DetailRecord):
        record = source
    else:
        external_id = await catalog_service.resolve_external_id(source.id, source.media_kind, connector=tmdb)
        record = await catalog_service.fetch_details(external_id, connector=omdb)
    sources = await load_sources(record.external_id, connector=watchmode)
    return TitleView(record=record, sources=sources)


async def load_title(
    external_id: str,
    *,
    omdb: OMDBConnector | None = None,
    watchmode: WatchmodeConnector | None = None,
) -> TitleView:
    """Fetch the detail record for an IMDb id, then its streaming offers."""
    record = await catalog_service.fetch_details(external_id, connector=omdb)
    return await load_single_title(record, watchmode=watchmode)
