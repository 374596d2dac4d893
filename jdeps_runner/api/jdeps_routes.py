from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from jdeps_runner.core.containers import build_jdeps_service
from jdeps_runner.domain.errors import (
    ConflictingOptions,
    ExecutableNotFound,
    InvalidEnvironment,
    NonZeroExit,
    ProcessExecutionError,
)
from jdeps_runner.domain.schemas import JDepsConfig
from jdeps_runner.services.jdeps_service import JDepsService

router = APIRouter(prefix="/api/jdeps", tags=["jdeps"])


@lru_cache(maxsize=1)
def get_jdeps_service() -> JDepsService:
    return build_jdeps_service()


# ── Request / Response schemas ────────────────────────────────────
class LocateRequest(BaseModel):
    executable: str | None = Field(
        None,
        description="jdeps binary or the directory holding it. Defaults to `JDEPS_EXECUTABLE`.",
    )
    jdk: dict[str, str] | None = Field(
        None,
        description="Toolchain requirements, e.g. `{'version': '17'}`.",
        json_schema_extra={"examples": [{"version": "17", "vendor": "temurin"}]},
    )


class RunRequest(LocateRequest):
    """Request body for a jdeps invocation."""

    options: JDepsConfig
    validate_options: bool | None = Field(
        None,
        description="Reject mutually exclusive options. Defaults to `JDEPS_VALIDATE_OPTIONS`.",
    )


class ExecutableResponse(BaseModel):
    executable: str


class CommandResponse(BaseModel):
    """Command line that would be executed."""

    argv: list[str]
    command_line: str


class RunResponse(BaseModel):
    """Outcome of a jdeps invocation that ran to completion."""

    success: bool
    exit_code: int
    output: str | None = None
    stderr: str | None = None
    message: str | None = None
    argv: list[str]
    command_line: str


def _raise_http(e: Exception) -> None:
    if isinstance(e, ConflictingOptions):
        raise HTTPException(status_code=400, detail={"message": str(e), "conflicts": e.conflicts})
    if isinstance(e, (ExecutableNotFound, InvalidEnvironment)):
        raise HTTPException(status_code=424, detail=f"Unable to find jdeps command: {e}")
    if isinstance(e, ProcessExecutionError):
        raise HTTPException(status_code=500, detail=f"Unable to execute jdeps command: {e}")
    raise e


# ── Endpoints ─────────────────────────────────────────────────────
@router.post(
    "/executable",
    response_model=ExecutableResponse,
    summary="Locate jdeps",
    response_description="Absolute path of the jdeps binary that would be used",
)
def locate(req: LocateRequest, service: JDepsService = Depends(get_jdeps_service)) -> dict[str, Any]:
    """Resolve the jdeps binary from toolchain, explicit path, Java home or `JAVA_HOME`."""
    try:
        return {"executable": str(service.locate(req.executable, req.jdk))}
    except (ExecutableNotFound, InvalidEnvironment) as e:
        _raise_http(e)


@router.post(
    "/command",
    response_model=CommandResponse,
    summary="Preview the jdeps command line",
    response_description="Argument vector and its printable rendering",
)
def command(req: RunRequest, service: JDepsService = Depends(get_jdeps_service)) -> dict[str, Any]:
    """Build the command line for `options` without running it."""
    try:
        cmd = service.preview(req.options, req.executable, req.jdk, req.validate_options)
    except (ConflictingOptions, ExecutableNotFound, InvalidEnvironment) as e:
        _raise_http(e)
    return {"argv": cmd.argv, "command_line": cmd.render()}


@router.post(
    "/run",
    response_model=RunResponse,
    summary="Run jdeps",
    response_description="Exit code, output and the exact command line",
)
def run(req: RunRequest, service: JDepsService = Depends(get_jdeps_service)) -> dict[str, Any]:
    """Run jdeps and report its outcome.

    A non-zero exit is reported with `success: false` together with the
    captured stderr and the command line, so the failure can be reproduced.
    """
    try:
        result = service.run(req.options, req.executable, req.jdk, req.validate_options)
    except NonZeroExit as e:
        return {
            "success": False,
            "exit_code": e.exit_code,
            "stderr": e.stderr or None,
            "message": str(e).strip(),
            "argv": e.command_line.argv,
            "command_line": e.rendered_command_line,
        }
    except (ConflictingOptions, ExecutableNotFound, InvalidEnvironment, ProcessExecutionError) as e:
        _raise_http(e)

    return {
        "success": True,
        "exit_code": result.exit_code,
        "output": result.output,
        "argv": result.command_line.argv,
        "command_line": result.command_line.render(),
    }
