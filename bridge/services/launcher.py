"""Detached launches of the OS terminal and file-browser openers.

The launched program is never waited on; success only means the OS created
the process.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from bridge.config import Settings, settings
from bridge.models.results import LaunchResult
from bridge.utils.logging import get_logger

log = get_logger(__name__)


class Launcher:
    """Builds and spawns ``open`` invocations."""

    def __init__(self, cfg: Settings | None = None) -> None:
        self._cfg = cfg or settings

    def terminal_argv(self, path: str) -> list[str]:
        return [self._cfg.bridge_open_executable, "-a", self._cfg.bridge_terminal_app, path]

    def file_browser_argv(self, path: str) -> list[str]:
        return [self._cfg.bridge_open_executable, path]

    def spawn(self, argv: list[str]) -> LaunchResult:
        """Start *argv* in its own session with stdio detached."""
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as exc:
            log.warning("launch.failed", argv=argv, error=str(exc))
            return LaunchResult.failed(str(exc))
        log.info("launch.spawned", argv=argv, pid=proc.pid)
        return LaunchResult.ok()

    def open_at(self, argv: list[str], path: str) -> LaunchResult:
        # Launchers report a missing target asynchronously (or not at all),
        # so it is checked before spawning.
        if not path or not Path(path).exists():
            log.warning("launch.missing_path", path=path)
            return LaunchResult.failed(f"path does not exist: {path}")
        return self.spawn(argv)


# Singleton
launcher = Launcher()
