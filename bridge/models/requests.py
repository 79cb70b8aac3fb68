"""Request bodies for the gateway endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class RepoRequest(BaseModel):
    cwd: str


class CommitRequest(BaseModel):
    # Empty messages are passed through so git reports its own rejection.
    message: str
    cwd: str


class PathRequest(BaseModel):
    path: str
