"""Response envelopes for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from reelscout.schema.details import DetailRecord
from reelscout.schema.streaming import StreamingSource


class FetchFailureRead(BaseModel):
    external_id: str
    error_kind: str
    error: str


class SearchResponse(BaseModel):
    """Hydrated search results plus the hits that could not be fetched."""
    query: str
    results: list[DetailRecord] = Field(default_factory=list)
    failures: list[FetchFailureRead] = Field(default_factory=list)


class TitleResponse(BaseModel):
    record: DetailRecord
    sources: list[StreamingSource] = Field(default_factory=list)
