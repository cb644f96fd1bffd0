"""Presenter port: display surface for the word of the day."""

from typing import Protocol

from domain.model.word_of_the_day import WordOfTheDayUpdate


class OverlayPresenter(Protocol):
    """A surface the refresh scheduler pushes results to."""

    def show(self, update: WordOfTheDayUpdate) -> None:
        """Render the latest word of the day."""
        ...

    def notify_error(self, title: str, message: str) -> None:
        """Report a failed refresh cycle."""
        ...

    def close(self) -> None:
        """Release whatever the surface holds."""
        ...
