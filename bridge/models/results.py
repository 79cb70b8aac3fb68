"""Normalized outcome shapes returned across the gateway boundary.

Every operation reports failure inside its result value.  ``error`` is
populated if and only if ``success`` is false, and is never an empty string.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class _Outcome(BaseModel):
    """Shared success/error pairing."""

    model_config = ConfigDict(frozen=True)

    success: bool
    error: Optional[str] = None

    @model_validator(mode="after")
    def _error_iff_failed(self):
        if self.success and self.error is not None:
            raise ValueError("error must be absent when success is true")
        if not self.success and not self.error:
            raise ValueError("error must be a non-empty string when success is false")
        return self


class CommandResult(_Outcome):
    """Result of running the version-control tool to completion."""

    output: str = ""

    @classmethod
    def ok(cls, output: str) -> CommandResult:
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: str, output: str = "") -> CommandResult:
        return cls(success=False, output=output, error=error)


class LaunchResult(_Outcome):
    """Result of spawning a detached launcher process."""

    @classmethod
    def ok(cls) -> LaunchResult:
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> LaunchResult:
        return cls(success=False, error=error)


class WorkflowStep(str, Enum):
    status = "status"
    add = "add"
    commit = "commit"
    push = "push"


class CommitAndPushResult(_Outcome):
    """Outcome of the status -> add -> commit -> push sequence.

    ``step`` is the step that failed, or the last step reached on success.
    """

    step: WorkflowStep
    nothing_to_commit: bool = False
