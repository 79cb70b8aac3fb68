"""Run the version-control executable and normalize its outcome.

Each call spawns its own process and waits for it to exit.  There is no
timeout: a hung git (e.g. waiting on credentials during ``push``) holds the
calling coroutine until it exits.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from bridge.config import Settings, settings
from bridge.models.results import CommandResult
from bridge.utils.logging import get_logger

log = get_logger(__name__)


class GitRunner:
    """Spawns git in a caller-supplied working directory."""

    def __init__(self, cfg: Settings | None = None) -> None:
        self._cfg = cfg or settings

    @property
    def executable(self) -> str:
        return self._cfg.bridge_git_executable

    async def run(self, args: Sequence[str], cwd: str) -> CommandResult:
        """Run ``git <args>`` inside *cwd* and capture both streams fully."""
        try:
            proc = await asyncio.create_subprocess_exec(
                self.executable, *args,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            log.warning("git.spawn_failed", args=list(args), cwd=cwd, error=str(exc))
            return CommandResult.failed(str(exc))

        stdout, stderr = await proc.communicate()
        out = stdout.decode("utf-8", errors="replace")
        err = stderr.decode("utf-8", errors="replace")
        log.debug("git.exec", args=list(args), cwd=cwd, rc=proc.returncode, out=out[:200])

        if proc.returncode == 0:
            return CommandResult.ok(out)
        if not err:
            err = f"git {' '.join(args)} exited with status {proc.returncode}"
        return CommandResult.failed(err, output=out)


# Singleton
git_runner = GitRunner()
