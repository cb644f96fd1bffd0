from fastapi import HTTPException, Request

from adapter.overlay.snapshot import SnapshotPresenter
from worker.scheduler import RefreshScheduler


def get_scheduler(request: Request) -> RefreshScheduler:
    scheduler = getattr(request.app.state, "scheduler", None)
    if scheduler is None:
        raise HTTPException(status_code=503, detail="Scheduler unavailable")
    return scheduler


def get_snapshot(request: Request) -> SnapshotPresenter:
    snapshot = getattr(request.app.state, "snapshot", None)
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Snapshot unavailable")
    return snapshot
