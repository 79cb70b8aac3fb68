"""Commit-all-and-push: the status -> add -> commit -> push sequence."""

from __future__ import annotations

from bridge.models.results import CommitAndPushResult, WorkflowStep
from bridge.services import gateway
from bridge.utils.logging import get_logger

log = get_logger(__name__)


async def commit_all_and_push(message: str, cwd: str) -> CommitAndPushResult:
    """Stage everything, commit with *message* and push, stopping at the first failure."""
    status = await gateway.git_status(cwd)
    if not status.success:
        return CommitAndPushResult(
            success=False, step=WorkflowStep.status, error=status.error,
        )
    if not status.output.strip():
        return CommitAndPushResult(
            success=True, step=WorkflowStep.status, nothing_to_commit=True,
        )

    if not message.strip():
        return CommitAndPushResult(
            success=False, step=WorkflowStep.commit, error="Commit message is empty",
        )

    steps = (
        (WorkflowStep.add, lambda: gateway.git_add_all(cwd)),
        (WorkflowStep.commit, lambda: gateway.git_commit(message, cwd)),
        (WorkflowStep.push, lambda: gateway.git_push(cwd)),
    )
    for step, run in steps:
        result = await run()
        if not result.success:
            log.info("workflow.step_failed", step=step.value, cwd=cwd)
            return CommitAndPushResult(success=False, step=step, error=result.error)

    log.info("workflow.pushed", cwd=cwd)
    return CommitAndPushResult(success=True, step=WorkflowStep.push)
