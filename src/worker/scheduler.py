"""Refresh scheduler - owns the periodic refresh loop and display surfaces.

Lifecycle:
    start() → loop: refresh_once() → sleep(interval) → refresh_once() ...
    stop()  → cancel loop (aborts any in-flight fetch) → close every surface

Each cycle either pushes the update to every registered surface or, on
failure, notifies every surface once and waits for the next period. A
cycle failure never stops the loop.
"""

import asyncio
import logging
from collections.abc import Mapping

from domain.model.errors import DomainError, RefreshInProgressError
from domain.model.word_of_the_day import WordOfTheDayUpdate
from port.presenter import OverlayPresenter
from services.word_of_the_day_service import WordOfTheDayService

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Word of the Day"


class RefreshScheduler:
    """Runs WordOfTheDayService on a timer and fans results out to surfaces."""

    def __init__(self, service: WordOfTheDayService, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.service = service
        self.interval_seconds = interval_seconds
        self._surfaces: dict[str, OverlayPresenter] = {}
        self._task: asyncio.Task | None = None
        self._refresh_lock = asyncio.Lock()

    # ── Surface table ────────────────────────────────────────

    @property
    def surfaces(self) -> dict[str, OverlayPresenter]:
        return dict(self._surfaces)

    def register_surface(self, name: str, surface: OverlayPresenter) -> None:
        if name in self._surfaces:
            raise ValueError(f"Surface already registered: {name}")
        self._surfaces[name] = surface

    def unregister_surface(self, name: str) -> OverlayPresenter | None:
        surface = self._surfaces.pop(name, None)
        if surface is not None:
            _release(name, surface)
        return surface

    def replace_surfaces(self, surfaces: Mapping[str, OverlayPresenter]) -> None:
        """Release all current surfaces and install a new set."""
        self._release_surfaces()
        self._surfaces = dict(surfaces)

    # ── Lifecycle ────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the refresh loop. No-op if already running."""
        if self.running:
            logger.debug("Refresh scheduler already running")
            return
        self._task = asyncio.create_task(self._run(), name="wotd-refresh")
        logger.info(
            "Refresh scheduler started",
            extra={"interval_seconds": self.interval_seconds, "surfaces": list(self._surfaces)},
        )

    async def stop(self) -> None:
        """Cancel the loop and release every surface. Safe to call twice."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._release_surfaces()
        logger.info("Refresh scheduler stopped")

    async def _run(self) -> None:
        while True:
            try:
                await self.refresh_once()
            except RefreshInProgressError:
                logger.info("Skipping scheduled refresh: previous refresh still running")
            await asyncio.sleep(self.interval_seconds)

    # ── Refresh cycle ────────────────────────────────────────

    async def refresh_once(self) -> WordOfTheDayUpdate | None:
        """Run one refresh cycle.

        Returns:
            The update on success, None if the cycle failed (surfaces notified).

        Raises:
            RefreshInProgressError: another cycle has not finished yet.
        """
        if self._refresh_lock.locked():
            raise RefreshInProgressError()

        async with self._refresh_lock:
            try:
                update = await self.service.refresh()
            except DomainError as e:
                logger.error(
                    f"Refresh failed: {e}",
                    extra={"error_type": type(e).__name__},
                )
                self._notify_error(str(e))
                return None
            except Exception as e:
                logger.error(f"Unexpected refresh error: {e}", exc_info=True)
                self._notify_error(str(e) or type(e).__name__)
                return None

            self._show(update)
            return update

    def _show(self, update: WordOfTheDayUpdate) -> None:
        for name, surface in list(self._surfaces.items()):
            try:
                surface.show(update)
            except Exception as e:
                logger.warning(
                    f"Surface failed to show update: {e}",
                    extra={"surface": name},
                )

    def _notify_error(self, message: str) -> None:
        for name, surface in list(self._surfaces.items()):
            try:
                surface.notify_error(NOTIFICATION_TITLE, message)
            except Exception as e:
                logger.warning(
                    f"Surface failed to report error: {e}",
                    extra={"surface": name},
                )

    def _release_surfaces(self) -> None:
        surfaces, self._surfaces = self._surfaces, {}
        for name, surface in surfaces.items():
            _release(name, surface)


def _release(name: str, surface: OverlayPresenter) -> None:
    """Best-effort close: log and continue."""
    try:
        surface.close()
    except Exception as e:
        logger.warning(f"Failed to release surface: {e}", extra={"surface": name})
