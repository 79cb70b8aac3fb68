"""Remote-procedure style entry point: ``POST /invoke/{command}``.

Mirrors how the desktop shell calls its backend, by operation name with a
JSON object of named arguments.
"""

from __future__ import annotations

from typing import Any, Union

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from bridge.auth import require_api_key
from bridge.models.results import CommandResult, LaunchResult
from bridge.services.gateway import COMMANDS, UnknownCommandError, invoke

router = APIRouter(tags=["invoke"], dependencies=[Depends(require_api_key)])


@router.get("/invoke", response_model=list[str])
async def list_commands() -> list[str]:
    """Names accepted by ``POST /invoke/{command}``."""
    return sorted(COMMANDS)


# Launch results keep their own shape (no "output" key).
@router.post("/invoke/{command}", response_model=None)
async def invoke_command(
    command: str,
    params: dict[str, Any] = Body(default_factory=dict),
) -> Union[CommandResult, LaunchResult]:
    try:
        return await invoke(command, params)
    except UnknownCommandError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
