"""Word-of-the-day domain models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from domain.model.errors import MissingFieldError
from domain.model.translation import JSONValue, TranslationResult


@dataclass(frozen=True)
class WordOfTheDay:
    """Headword announced by the word-of-the-day endpoint."""
    lod_id: str
    lemma: str
    date: str = ""

    @classmethod
    def from_payload(cls, payload: JSONValue) -> "WordOfTheDay":
        """Build from the raw word-of-the-day JSON.

        Raises:
            MissingFieldError: if lod_id or lemma is absent or empty.
        """
        data = payload if isinstance(payload, dict) else {}

        raw_id = data.get("lod_id")
        lod_id = ""
        if isinstance(raw_id, str):
            lod_id = raw_id.strip()
        elif isinstance(raw_id, (int, float)) and not isinstance(raw_id, bool):
            lod_id = str(raw_id)

        raw_lemma = data.get("lemma")
        lemma = raw_lemma.strip() if isinstance(raw_lemma, str) else ""

        missing = [name for name, value in (("lod_id", lod_id), ("lemma", lemma)) if not value]
        if missing:
            raise MissingFieldError(missing)

        start_at = data.get("start_at")
        return cls(
            lod_id=lod_id,
            lemma=lemma,
            date=start_at if isinstance(start_at, str) else "",
        )


@dataclass(frozen=True)
class WordOfTheDayUpdate:
    """Result of one successful refresh cycle, handed to every surface."""
    lemma: str
    date: str
    translations: TranslationResult
    lod_id: str = ""
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
