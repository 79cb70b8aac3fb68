"""The six gateway operations and the name -> operation dispatch table.

The set is closed: the desktop shell invokes operations by their remote name
(``git_status``, ``open_terminal_at``, ...) and :func:`invoke` resolves the
name, validates the arguments and runs the operation.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, NamedTuple, Union

from pydantic import BaseModel

from bridge.models.requests import CommitRequest, PathRequest, RepoRequest
from bridge.models.results import CommandResult, LaunchResult
from bridge.services import git_runner as _git_mod
from bridge.services import launcher as _launcher_mod

GatewayResult = Union[CommandResult, LaunchResult]


# ── version control ───────────────────────────────────────────────────────


async def git_status(cwd: str) -> CommandResult:
    return await _git_mod.git_runner.run(["status", "--porcelain"], cwd)


async def git_add_all(cwd: str) -> CommandResult:
    return await _git_mod.git_runner.run(["add", "-A"], cwd)


async def git_commit(message: str, cwd: str) -> CommandResult:
    return await _git_mod.git_runner.run(["commit", "-m", message], cwd)


async def git_push(cwd: str) -> CommandResult:
    return await _git_mod.git_runner.run(["push"], cwd)


# ── OS launchers ──────────────────────────────────────────────────────────


async def open_terminal_at(path: str) -> LaunchResult:
    launcher = _launcher_mod.launcher
    return launcher.open_at(launcher.terminal_argv(path), path)


async def open_finder_at(path: str) -> LaunchResult:
    launcher = _launcher_mod.launcher
    return launcher.open_at(launcher.file_browser_argv(path), path)


# ── dispatch ──────────────────────────────────────────────────────────────


class GatewayCommand(NamedTuple):
    request: type[BaseModel]
    handler: Callable[..., Awaitable[GatewayResult]]


COMMANDS: dict[str, GatewayCommand] = {
    "git_status": GatewayCommand(RepoRequest, git_status),
    "git_add_all": GatewayCommand(RepoRequest, git_add_all),
    "git_commit": GatewayCommand(CommitRequest, git_commit),
    "git_push": GatewayCommand(RepoRequest, git_push),
    "open_terminal_at": GatewayCommand(PathRequest, open_terminal_at),
    "open_finder_at": GatewayCommand(PathRequest, open_finder_at),
}


class UnknownCommandError(LookupError):
    """Raised by :func:`invoke` for a name outside :data:`COMMANDS`."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


async def invoke(name: str, params: dict[str, Any]) -> GatewayResult:
    """Run the operation registered under *name* with *params*.

    Raises :class:`UnknownCommandError` for unregistered names and
    ``pydantic.ValidationError`` when *params* do not fit the operation.
    """
    command = COMMANDS.get(name)
    if command is None:
        raise UnknownCommandError(name)
    req = command.request.model_validate(params)
    return await command.handler(**req.model_dump())
