"""Word-of-the-day routes.

Endpoints:
- GET /word-of-the-day: Latest successful refresh
- POST /word-of-the-day/refresh: Run one refresh cycle now
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from adapter.overlay.snapshot import SnapshotPresenter
from api.dependencies import get_scheduler, get_snapshot
from api.models import WordOfTheDayResponse
from domain.model.errors import RefreshInProgressError
from worker.scheduler import RefreshScheduler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/word-of-the-day", tags=["word-of-the-day"])


@router.get("", response_model=WordOfTheDayResponse)
async def get_word_of_the_day(
    snapshot: SnapshotPresenter = Depends(get_snapshot),
):
    """Return the most recent word of the day."""
    update = snapshot.latest
    if update is None:
        raise HTTPException(status_code=404, detail="No word of the day fetched yet")
    return WordOfTheDayResponse.from_update(update)


@router.post("/refresh", response_model=WordOfTheDayResponse)
async def refresh_word_of_the_day(
    scheduler: RefreshScheduler = Depends(get_scheduler),
    snapshot: SnapshotPresenter = Depends(get_snapshot),
):
    """Run a refresh cycle immediately.

    Returns 409 if a cycle is already running and 502 if the cycle failed.
    """
    try:
        update = await scheduler.refresh_once()
    except RefreshInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if update is None:
        error = snapshot.last_error
        detail = error.message if error else "Refresh failed"
        raise HTTPException(status_code=502, detail=detail)

    logger.info("Manual refresh succeeded", extra={"lemma": update.lemma})
    return WordOfTheDayResponse.from_update(update)
