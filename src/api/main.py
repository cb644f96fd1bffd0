"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import health, word_of_the_day
from adapter.overlay.log_overlay import LogOverlayPresenter
from adapter.overlay.snapshot import SnapshotPresenter
from utils.config import load_settings
from utils.logging import setup_structured_logging
from worker.factory import build_scheduler

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "LOD Word of the Day"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the refresh scheduler on startup, stop it on shutdown."""
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    snapshot = SnapshotPresenter()
    scheduler = build_scheduler(settings)
    scheduler.register_surface("snapshot", snapshot)
    scheduler.register_surface("log", LogOverlayPresenter())

    app.state.snapshot = snapshot
    app.state.scheduler = scheduler
    scheduler.start()

    yield  # App runs here

    await scheduler.stop()


app = FastAPI(
    title=SERVICE_NAME,
    description="Fetches the LOD word of the day and its translations on a schedule",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(word_of_the_day.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
