"""Sub-build runner for executing the client and server builds.

This module handles:
- Splitting configured build commands into argument lists
- Executing a sub-build with subprocess, streaming to the caller's terminal
- Failing fast on a non-zero exit status

Sub-builds inherit stdout/stderr so their progress is visible live.
There is no timeout and no retry.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from prodbuild.types import StepResult

logger = logging.getLogger(__name__)


class StepExecutionError(Exception):
    """Raised when a sub-build fails or cannot be started."""

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        code: str = "step_failed",
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.code = code


def compose_command(command: str) -> list[str]:
    """Split a configured command string into arguments.

    Args:
        command: Shell-style command string, e.g. ``npm run build:client``.

    Returns:
        Command as list of strings suitable for subprocess.

    Raises:
        StepExecutionError: If the command is empty or cannot be parsed.
    """
    try:
        cmd = shlex.split(command)
    except ValueError as e:
        raise StepExecutionError(
            f"Invalid command {command!r}: {e}",
            code="invalid_command",
        ) from e

    if not cmd:
        raise StepExecutionError("Empty build command", code="invalid_command")
    return cmd


def run_step(name: str, command: str, cwd: Path) -> StepResult:
    """Run one sub-build to completion.

    Args:
        name: Step name used in logs and errors.
        command: Command string to execute.
        cwd: Working directory for the child process.

    Returns:
        StepResult for a successful run.

    Raises:
        StepExecutionError: If the command exits non-zero or fails to start.
    """
    cmd = compose_command(command)
    cmd_str = shlex.join(cmd)
    logger.info("Executing %s build: %s", name, cmd_str)
    logger.info("Working directory: %s", cwd)

    started_at = datetime.now(timezone.utc)

    try:
        # No stdout/stderr arguments: the child writes straight to our streams
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except OSError as e:
        error_message = f"Failed to execute {name} build: {e}"
        logger.error(error_message)
        raise StepExecutionError(
            error_message,
            exit_code=None,
            code="execution_error",
        ) from e

    finished_at = datetime.now(timezone.utc)
    exit_code = result.returncode

    if exit_code != 0:
        error_message = f"{name.capitalize()} build failed with exit code {exit_code}"
        logger.error("%s: %s", error_message, cmd_str)
        raise StepExecutionError(error_message, exit_code=exit_code)

    step = StepResult(
        name=name,
        command=cmd_str,
        exit_code=exit_code,
        started_at=started_at,
        finished_at=finished_at,
    )
    logger.info("%s build finished in %.1fs", name.capitalize(), step.duration)
    return step


__all__ = [
    "StepExecutionError",
    "compose_command",
    "run_step",
]
