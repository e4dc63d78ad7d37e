"""Outcome dataclasses for commands and operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Status(Enum):
    """Summary status of a single operation run."""

    CLEARED = "Cleared"
    ALREADY_CLEAN = "Already Clean"
    NONE = "None"
    FAILED = "Failed"
    DRY_RUN = "Dry Run"
    UNSUPPORTED = "Unsupported"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_error(self) -> bool:
        """Whether this outcome means the operation did not do its job."""
        return self in (Status.FAILED, Status.UNSUPPORTED)


@dataclass(slots=True)
class CommandResult:
    """Result of running one or more external commands."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of a single operation run. Never mutated after creation."""

    operation_name: str
    status: Status
    timestamp: datetime = field(default_factory=datetime.now)
    command_result: CommandResult | None = None
