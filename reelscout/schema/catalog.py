"""Catalog provider schemas for trending entries and external id lookups."""

from __future__ import annotations

import enum

from pydantic import Field, computed_field

from reelscout.schema.base import ValueModel

POSTER_BASE = "https://image.tmdb.org/t/p/w500"
UNKNOWN_TITLE = "Unknown Title"


class MediaKind(str, enum.Enum):
    """Catalog media categories that can be resolved to an external id."""
    MOVIE = "movie"
    TV = "tv"


class TrendingWindow(str, enum.Enum):
    DAY = "day"
    WEEK = "week"


class CatalogItem(ValueModel):
    """Trending feed entry; movies carry ``title`` and TV shows carry ``name``."""
    id: int
    media_kind: MediaKind = Field(validation_alias="media_type")
    title: str | None = None
    name: str | None = None
    poster_path: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_title(self) -> str:
        return self.title or self.name or UNKNOWN_TITLE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def poster_url(self) -> str | None:
        if not self.poster_path:
            return None
        return f"{POSTER_BASE}{self.poster_path}"


class ExternalIds(ValueModel):
    imdb_id: str | None = None
