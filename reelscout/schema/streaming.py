"""Streaming provider schemas."""

from __future__ import annotations

import enum

from pydantic import Field, computed_field

from reelscout.schema.base import ValueModel


class OfferType(str, enum.Enum):
    """Known offer types; other upstream values are kept as raw strings."""
    SUB = "sub"
    RENT = "rent"
    BUY = "buy"
    FREE = "free"


OFFER_LABELS = {
    OfferType.SUB.value: "Stream",
    OfferType.RENT.value: "Rent",
    OfferType.BUY.value: "Buy",
    OfferType.FREE.value: "Free",
}


class TitleMatch(ValueModel):
    id: int


class TitleSearch(ValueModel):
    title_results: tuple[TitleMatch, ...]


class StreamingSource(ValueModel):
    """One offer of a title on a streaming service in a given region."""
    provider_id: int = Field(validation_alias="source_id")
    name: str
    offer_type: str = Field(validation_alias="type")
    region: str
    web_url: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_type(self) -> str:
        return OFFER_LABELS.get(self.offer_type, self.offer_type.capitalize())
