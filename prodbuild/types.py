"""Shared type definitions for prodbuild.

This module contains enums and dataclasses shared across subpackages
to avoid circular imports.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class BuildPhase(str, Enum):
    """Phase of a production build."""

    CLIENT = "client"
    SERVER = "server"


@dataclass
class StepResult:
    """Result of a single sub-build execution.

    Attributes:
        name: Step name (client or server).
        command: The command that was executed.
        exit_code: Process exit code.
        started_at: Step start time.
        finished_at: Step finish time.
    """

    name: str
    command: str
    exit_code: int
    started_at: datetime
    finished_at: datetime

    @property
    def duration(self) -> float:
        """Elapsed time in seconds."""
        return (self.finished_at - self.started_at).total_seconds()


@dataclass
class BuildSummary:
    """Outcome of a successful production build."""

    dist_dir: Path
    manifest_path: Path
    launcher_path: Path
    started_at: datetime
    finished_at: datetime
    steps: list[StepResult] = field(default_factory=list)


__all__ = ["BuildPhase", "BuildSummary", "StepResult"]
