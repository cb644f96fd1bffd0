"""Standalone worker entry point: refresh on a timer and log each overlay."""

#!/usr/bin/env python
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapter.overlay.log_overlay import LogOverlayPresenter
from utils.config import Settings, load_settings
from utils.logging import setup_structured_logging
from worker.factory import build_scheduler

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)


async def run(settings: Settings) -> None:
    scheduler = build_scheduler(settings)
    scheduler.register_surface("log", LogOverlayPresenter())
    scheduler.start()
    try:
        # Runs until cancelled (Ctrl+C)
        await asyncio.Event().wait()
    finally:
        await scheduler.stop()


def main():
    """Main entry point for the worker."""
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        logger.info(
            "Starting word-of-the-day worker...",
            extra={"base_url": settings.base_url, "locale": settings.locale, "languages": settings.languages},
        )
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Worker stopped")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
