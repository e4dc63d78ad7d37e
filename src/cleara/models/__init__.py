"""Cleara data models."""

from cleara.models.operation import Action, CommandStep, Operation, Skip
from cleara.models.run_config import RunConfig
from cleara.models.run_result import CommandResult, RunResult, Status

__all__ = [
    "Action",
    "CommandResult",
    "CommandStep",
    "Operation",
    "RunConfig",
    "RunResult",
    "Skip",
    "Status",
]
