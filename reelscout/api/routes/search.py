from __future__ import annotations

from fastapi import APIRouter, Query

from reelscout.schema.details import SearchKind
from reelscout.schema.responses import FetchFailureRead, SearchResponse
from reelscout.services import search_service

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query(default=""),
    kind: SearchKind = Query(default=SearchKind.ALL),
) -> SearchResponse:
    """Search titles; a blank query returns an empty result without upstream calls."""
    outcome = await search_service.search(q, kind)
    return SearchResponse(
        query=outcome.query,
        results=outcome.records,
        failures=[
            FetchFailureRead(
                external_id=failure.external_id,
                error_kind=failure.error_kind,
                error=failure.error,
            )
            for failure in outcome.failures
        ],
    )
