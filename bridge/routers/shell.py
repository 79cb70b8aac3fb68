"""Terminal and file-browser launch endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bridge.auth import require_api_key
from bridge.models.requests import PathRequest
from bridge.models.results import LaunchResult
from bridge.services import gateway

router = APIRouter(
    prefix="/shell",
    tags=["shell"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/terminal", response_model=LaunchResult)
async def open_terminal(req: PathRequest) -> LaunchResult:
    """Open the terminal application at *path* without waiting for it."""
    return await gateway.open_terminal_at(req.path)


@router.post("/file-browser", response_model=LaunchResult)
async def open_file_browser(req: PathRequest) -> LaunchResult:
    """Reveal *path* in the OS file browser."""
    return await gateway.open_finder_at(req.path)
