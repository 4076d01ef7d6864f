"""Detail provider schemas: search summaries, full records and ratings."""

from __future__ import annotations

import enum
from urllib.parse import quote

from pydantic import Field, computed_field

from reelscout.schema.base import ValueModel

NOT_AVAILABLE = "N/A"
ROTTEN_TOMATOES = "Rotten Tomatoes"
ROTTEN_TOMATOES_SEARCH = "https://www.rottentomatoes.com/search?search="


class SearchKind(str, enum.Enum):
    """Result filter applied to hydrated search records."""
    ALL = "all"
    MOVIE = "movie"
    SERIES = "series"

    def matches(self, media_kind: str) -> bool:
        return self is SearchKind.ALL or media_kind == self.value


class Rating(ValueModel):
    source: str = Field(validation_alias="Source")
    value: str = Field(validation_alias="Value")


class SearchSummary(ValueModel):
    """Stub returned by the search endpoint; already carries its external id."""
    external_id: str = Field(validation_alias="imdbID")
    title: str = Field(validation_alias="Title")
    year: str = Field(validation_alias="Year")
    media_kind: str = Field(default=NOT_AVAILABLE, validation_alias="Type")
    poster: str = Field(default=NOT_AVAILABLE, validation_alias="Poster")


class SearchPage(ValueModel):
    results: tuple[SearchSummary, ...] = Field(default=(), validation_alias="Search")
    total_results: str | None = Field(default=None, validation_alias="totalResults")


class DetailRecord(ValueModel):
    """Canonical detail record for one external id.

    Only the id, title and year are required; the provider spells every other
    missing value as ``"N/A"`` and the defaults follow that convention.
    """
    external_id: str = Field(validation_alias="imdbID")
    title: str = Field(validation_alias="Title")
    year: str = Field(validation_alias="Year")
    rated: str = Field(default=NOT_AVAILABLE, validation_alias="Rated")
    released: str = Field(default=NOT_AVAILABLE, validation_alias="Released")
    runtime: str = Field(default=NOT_AVAILABLE, validation_alias="Runtime")
    genre: str = Field(default=NOT_AVAILABLE, validation_alias="Genre")
    director: str = Field(default=NOT_AVAILABLE, validation_alias="Director")
    writer: str = Field(default=NOT_AVAILABLE, validation_alias="Writer")
    actors: str = Field(default=NOT_AVAILABLE, validation_alias="Actors")
    plot: str = Field(default=NOT_AVAILABLE, validation_alias="Plot")
    language: str = Field(default=NOT_AVAILABLE, validation_alias="Language")
    country: str = Field(default=NOT_AVAILABLE, validation_alias="Country")
    awards: str = Field(default=NOT_AVAILABLE, validation_alias="Awards")
    poster_url: str = Field(default=NOT_AVAILABLE, validation_alias="Poster")
    ratings: tuple[Rating, ...] = Field(default=(), validation_alias="Ratings")
    imdb_rating: str = Field(default=NOT_AVAILABLE, validation_alias="imdbRating")
    metascore: str = Field(default=NOT_AVAILABLE, validation_alias="Metascore")
    media_kind: str = Field(default=NOT_AVAILABLE, validation_alias="Type")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rotten_tomatoes_score(self) -> str:
        for rating in self.ratings:
            if rating.source == ROTTEN_TOMATOES:
                return rating.value
        return NOT_AVAILABLE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rotten_tomatoes_url(self) -> str:
        return f"{ROTTEN_TOMATOES_SEARCH}{quote(self.title, safe='')}"

    @property
    def year_key(self) -> str:
        """Four-character year prefix; series ranges sort by their first year."""
        return self.year[:4]
