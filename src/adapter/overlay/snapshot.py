"""Overlay surface that keeps the latest result in memory for the API."""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from domain.model.word_of_the_day import WordOfTheDayUpdate


@dataclass(frozen=True)
class RefreshError:
    """Last failure reported to the surface."""
    title: str
    message: str
    occurred_at: datetime


class SnapshotPresenter:
    """Thread-safe holder of the most recent update and error."""

    def __init__(self):
        self._lock = threading.Lock()
        self._latest: WordOfTheDayUpdate | None = None
        self._last_error: RefreshError | None = None
        self._closed = False

    @property
    def latest(self) -> WordOfTheDayUpdate | None:
        with self._lock:
            return self._latest

    @property
    def last_error(self) -> RefreshError | None:
        with self._lock:
            return self._last_error

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def show(self, update: WordOfTheDayUpdate) -> None:
        with self._lock:
            self._latest = update
            self._last_error = None

    def notify_error(self, title: str, message: str) -> None:
        with self._lock:
            self._last_error = RefreshError(
                title=title,
                message=message,
                occurred_at=datetime.now(timezone.utc),
            )

    def close(self) -> None:
        # The last snapshot stays readable after the scheduler stops.
        with self._lock:
            self._closed = True
