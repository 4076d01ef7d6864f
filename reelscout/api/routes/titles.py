from __future__ import annotations

from fastapi import APIRouter, Path

from reelscout.schema.catalog import CatalogItem, MediaKind
from reelscout.schema.responses import TitleResponse
from reelscout.schema.streaming import StreamingSource
from reelscout.services import title_service

router = APIRouter()


@router.get("/catalog/{media_kind}/{catalog_id}", response_model=TitleResponse)
async def get_catalog_title(media_kind: MediaKind, catalog_id: int = Path(..., ge=1)) -> TitleResponse:
    """Resolve a trending entry through the full catalog -> detail -> streaming pipeline."""
    view = await title_service.load_single_title(CatalogItem(id=catalog_id, media_kind=media_kind))
    return TitleResponse(record=view.record, sources=view.sources)


@router.get("/{external_id}", response_model=TitleResponse)
async def get_title(external_id: str) -> TitleResponse:
    view = await title_service.load_title(external_id)
    return TitleResponse(record=view.record, sources=view.sources)


@router.get("/{external_id}/sources", response_model=list[StreamingSource])
async def get_title_sources(external_id: str) -> list[StreamingSource]:
    return await title_service.load_sources(external_id)
