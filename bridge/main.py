"""FastAPI application entry-point."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bridge import __version__
from bridge.config import settings
from bridge.routers import git, health, invoke, shell
from bridge.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    setup_logging()
    log.info("bridge.started", version=__version__, git=settings.bridge_git_executable)
    yield
    log.info("bridge.stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Workspace Bridge",
        description="git and OS launcher gateway for the desktop shell",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.bridge_cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-API-Key"],
    )

    app.include_router(health.router)
    app.include_router(git.router)
    app.include_router(shell.router)
    app.include_router(invoke.router)
    return app


# Module-level instance used by ``uvicorn bridge.main:app``.
app = create_app()
