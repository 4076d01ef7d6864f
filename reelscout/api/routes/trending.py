from __future__ import annotations

from fastapi import APIRouter, Query

from reelscout.schema.catalog import CatalogItem, TrendingWindow
from reelscout.services import catalog_service

router = APIRouter()


@router.get("", response_model=list[CatalogItem])
async def list_trending(window: TrendingWindow = Query(default=TrendingWindow.WEEK)) -> list[CatalogItem]:
    return await catalog_service.list_trending(window)
