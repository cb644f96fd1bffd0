"""Word-of-the-day refresh pipeline.

Pipeline: word-of-the-day endpoint → entry endpoint → translation extraction.
Errors from either fetch propagate; the scheduler decides what to do with them.
"""

import logging

from domain.model.errors import NoTranslationsError
from domain.model.translation import has_translations
from domain.model.word_of_the_day import WordOfTheDayUpdate
from port.http_json import HttpJsonPort
from services.entry_fetcher import fetch_entry, fetch_word_of_the_day
from services.translation_extractor import extract_translations
from utils.config import Settings

logger = logging.getLogger(__name__)


class WordOfTheDayService:
    """Produces one WordOfTheDayUpdate per call to refresh()."""

    def __init__(self, client: HttpJsonPort, settings: Settings):
        self.client = client
        self.settings = settings

    async def refresh(self) -> WordOfTheDayUpdate:
        """Fetch today's word and its translations.

        Raises:
            MissingFieldError: word-of-the-day payload lacks lod_id/lemma.
                The entry endpoint is not called in that case.
            HttpError, DecodeError, TransportError: from either fetch.
            NoTranslationsError: only when settings.require_translations is set.
        """
        settings = self.settings
        word = await fetch_word_of_the_day(
            self.client, settings.base_url, settings.locale, settings.user_agent,
        )
        entry = await fetch_entry(
            self.client, settings.base_url, settings.locale, word.lod_id, settings.user_agent,
        )
        translations = extract_translations(entry, settings.languages, settings.max_translations)

        if not has_translations(translations):
            if settings.require_translations:
                raise NoTranslationsError(word.lemma)
            logger.warning(
                "Entry has no translations for the wanted languages",
                extra={"lod_id": word.lod_id, "lemma": word.lemma, "languages": settings.languages},
            )

        logger.info(
            "Word of the day refreshed",
            extra={
                "lod_id": word.lod_id,
                "lemma": word.lemma,
                "counts": {lang: len(values) for lang, values in translations.items()},
            },
        )
        return WordOfTheDayUpdate(
            lemma=word.lemma,
            date=word.date,
            translations=translations,
            lod_id=word.lod_id,
        )
