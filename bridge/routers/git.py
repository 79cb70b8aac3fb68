"""Version-control endpoints.

Operation failures come back as ``200`` with ``success=false``; the caller
reads ``error`` for git's own message.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bridge.auth import require_api_key
from bridge.models.requests import CommitRequest, RepoRequest
from bridge.models.results import CommandResult, CommitAndPushResult
from bridge.services import gateway
from bridge.services.workflows import commit_all_and_push

router = APIRouter(
    prefix="/git",
    tags=["git"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/status", response_model=CommandResult)
async def status(req: RepoRequest) -> CommandResult:
    """``git status --porcelain`` in the given directory."""
    return await gateway.git_status(req.cwd)


@router.post("/add-all", response_model=CommandResult)
async def add_all(req: RepoRequest) -> CommandResult:
    """Stage every change (``git add -A``)."""
    return await gateway.git_add_all(req.cwd)


@router.post("/commit", response_model=CommandResult)
async def commit(req: CommitRequest) -> CommandResult:
    return await gateway.git_commit(req.message, req.cwd)


@router.post("/push", response_model=CommandResult)
async def push(req: RepoRequest) -> CommandResult:
    return await gateway.git_push(req.cwd)


@router.post("/commit-all-and-push", response_model=CommitAndPushResult)
async def commit_and_push(req: CommitRequest) -> CommitAndPushResult:
    """Run status, add, commit and push in order, stopping at the first failure."""
    return await commit_all_and_push(req.message, req.cwd)
