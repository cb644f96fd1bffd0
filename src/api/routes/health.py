"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from adapter.overlay.snapshot import SnapshotPresenter
from api.dependencies import get_scheduler, get_snapshot
from worker.scheduler import RefreshScheduler

router = APIRouter(prefix="/health", tags=["health"])


def _isoformat(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


@router.get("")
async def health(
    scheduler: RefreshScheduler = Depends(get_scheduler),
    snapshot: SnapshotPresenter = Depends(get_snapshot),
):
    """Health check with scheduler and last-refresh status."""
    latest = snapshot.latest
    last_error = snapshot.last_error

    health_status = {
        "status": "healthy" if scheduler.running else "unhealthy",
        "timestamp": _isoformat(datetime.now(timezone.utc)),
        "scheduler": {
            "running": scheduler.running,
            "interval_seconds": scheduler.interval_seconds,
            "surfaces": sorted(scheduler.surfaces),
        },
        "last_refresh": {
            "lemma": latest.lemma if latest else None,
            "fetched_at": _isoformat(latest.fetched_at) if latest else None,
            "error": last_error.message if last_error else None,
            "error_at": _isoformat(last_error.occurred_at) if last_error else None,
        },
    }

    status_code = status.HTTP_200_OK if scheduler.running else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=health_status, status_code=status_code)
