"""Pydantic models for API responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from adapter.overlay.text_overlay import format_overlay
from domain.model.word_of_the_day import WordOfTheDayUpdate


class OverlayResponse(BaseModel):
    """Overlay text as rendered on display surfaces."""
    title: str
    body: str


class WordOfTheDayResponse(BaseModel):
    """Response model for the latest word of the day."""
    lod_id: str = Field(..., description="LOD entry identifier")
    lemma: str = Field(..., description="Headword")
    date: str = Field("", description="Date the word is featured, as sent by the API")
    translations: dict[str, list[str]] = Field(
        default_factory=dict, description="Language code -> translations, in configured order",
    )
    overlay: OverlayResponse
    fetched_at: datetime

    @classmethod
    def from_update(cls, update: WordOfTheDayUpdate) -> "WordOfTheDayResponse":
        text = format_overlay(update)
        return cls(
            lod_id=update.lod_id,
            lemma=update.lemma,
            date=update.date,
            translations=update.translations,
            overlay=OverlayResponse(title=text.title, body=text.body),
            fetched_at=update.fetched_at,
        )
