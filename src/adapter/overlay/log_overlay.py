"""Overlay surface that writes to the application log."""

import logging

from adapter.overlay.text_overlay import format_overlay
from domain.model.word_of_the_day import WordOfTheDayUpdate

logger = logging.getLogger(__name__)


class LogOverlayPresenter:
    """Presents each update as a structured log record."""

    def __init__(self, name: str = "log"):
        self.name = name

    def show(self, update: WordOfTheDayUpdate) -> None:
        text = format_overlay(update)
        logger.info(
            "%s\n%s", text.title, text.body,
            extra={"surface": self.name, "lemma": update.lemma, "lod_id": update.lod_id},
        )

    def notify_error(self, title: str, message: str) -> None:
        logger.error(f"{title}: {message}", extra={"surface": self.name})

    def close(self) -> None:
        logger.debug("Log overlay closed", extra={"surface": self.name})
