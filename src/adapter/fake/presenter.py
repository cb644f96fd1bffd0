"""In-memory implementation of OverlayPresenter for testing."""

from domain.model.word_of_the_day import WordOfTheDayUpdate


class FakePresenter:
    """Fake surface that records every call it receives."""

    def __init__(self, fail_on: set[str] | None = None):
        self.fail_on = set(fail_on or ())
        self.shown: list[WordOfTheDayUpdate] = []
        self.errors: list[tuple[str, str]] = []
        self.closed = False

    def _maybe_fail(self, method: str) -> None:
        if method in self.fail_on:
            raise RuntimeError(f"{method} failed")

    def show(self, update: WordOfTheDayUpdate) -> None:
        self._maybe_fail("show")
        self.shown.append(update)

    def notify_error(self, title: str, message: str) -> None:
        self._maybe_fail("notify_error")
        self.errors.append((title, message))

    def close(self) -> None:
        self._maybe_fail("close")
        self.closed = True
