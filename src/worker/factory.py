"""Wiring of the refresh scheduler from settings."""

from adapter.external.httpx_json import HttpxJsonClient
from services.word_of_the_day_service import WordOfTheDayService
from utils.config import Settings
from worker.scheduler import RefreshScheduler


def build_scheduler(settings: Settings) -> RefreshScheduler:
    """Create a scheduler backed by the httpx client. No surfaces registered."""
    client = HttpxJsonClient(timeout=settings.http_timeout)
    service = WordOfTheDayService(client, settings)
    return RefreshScheduler(service, settings.refresh_seconds)
