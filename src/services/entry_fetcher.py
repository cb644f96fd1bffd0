"""LOD API fetchers.

Builds the word-of-the-day and entry URLs and issues exactly one GET per
call through an injected HttpJsonPort. No retries happen here: a failed
call surfaces to the caller, which waits for the next scheduled cycle.

API: https://lod.lu/api/{locale}/word-of-the-day
     https://lod.lu/api/{locale}/entry/{lod_id}
"""

import logging
from urllib.parse import quote

from domain.model.translation import JSONValue
from domain.model.word_of_the_day import WordOfTheDay
from port.http_json import HttpJsonPort

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://lod.lu"
DEFAULT_LOCALE = "lb"
DEFAULT_USER_AGENT = "lod-wotd/overlay/1.0"


def build_word_of_the_day_url(base_url: str, locale: str) -> str:
    return f"{base_url.rstrip('/')}/api/{quote(locale, safe='')}/word-of-the-day"


def build_entry_url(base_url: str, locale: str, entry_id: str) -> str:
    return f"{base_url.rstrip('/')}/api/{quote(locale, safe='')}/entry/{quote(entry_id, safe='')}"


def request_headers(user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }


async def fetch_word_of_the_day(
    client: HttpJsonPort,
    base_url: str = DEFAULT_BASE_URL,
    locale: str = DEFAULT_LOCALE,
    user_agent: str = DEFAULT_USER_AGENT,
) -> WordOfTheDay:
    """Fetch today's headword.

    Raises:
        HttpError, DecodeError, TransportError: from the HTTP client.
        MissingFieldError: if lod_id or lemma is missing from the payload.
    """
    url = build_word_of_the_day_url(base_url, locale)
    payload = await client.get_json(url, request_headers(user_agent))
    word = WordOfTheDay.from_payload(payload)
    logger.debug(
        "Word of the day fetched",
        extra={"lod_id": word.lod_id, "lemma": word.lemma, "date": word.date},
    )
    return word


async def fetch_entry(
    client: HttpJsonPort,
    base_url: str,
    locale: str,
    entry_id: str,
    user_agent: str = DEFAULT_USER_AGENT,
) -> JSONValue:
    """Fetch the raw entry document for `entry_id`.

    The parsed JSON is returned as-is; interpreting it is the extractor's job.
    """
    url = build_entry_url(base_url, locale, entry_id)
    document = await client.get_json(url, request_headers(user_agent))
    logger.debug("Entry document fetched", extra={"lod_id": entry_id, "url": url})
    return document
