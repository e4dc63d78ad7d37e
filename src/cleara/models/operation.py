"""Base cleanup operation interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from cleara.models.run_result import Status

log = logging.getLogger(__name__)


class Action(Enum):
    """Cleanup actions, plus the ``ALL`` selector for the full batch."""

    DROP_CACHE = "drop"
    CLEAN_TMP = "tmp"
    CLEAN_PKG_CACHE = "pkg"
    PURGE_CONFIGS = "purge"
    CLEAN_USER_CACHE = "cache"
    ALL = "all"


# Order of the full cleanup batch.
BATCH_ORDER: tuple[Action, ...] = (
    Action.DROP_CACHE,
    Action.CLEAN_TMP,
    Action.CLEAN_PKG_CACHE,
    Action.PURGE_CONFIGS,
    Action.CLEAN_USER_CACHE,
)


@dataclass(frozen=True, slots=True)
class CommandStep:
    """One external command of an operation.

    ``privileged`` steps get wrapped with sudo when the process is not
    root. ``input`` is fed to the command's stdin.
    """

    argv: tuple[str, ...]
    privileged: bool = False
    input: str | None = None

    def __str__(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True, slots=True)
class Skip:
    """Precheck outcome telling the runner not to execute any command."""

    status: Status
    message: str


class Operation(ABC):
    """Base class for all cleanup operations.

    Operations are defined statically and registered once per session.
    They never modify anything themselves: the runner asks for a
    precheck and then for the command steps to run.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Summary label, e.g. 'System Cache'."""

    @property
    @abstractmethod
    def action(self) -> Action:
        """The action this operation implements."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Progress label, e.g. 'Dropping system cache...'."""

    @property
    def estimated_duration(self) -> float:
        """Expected run time in seconds. Only used to pace the spinner."""
        return 3.0

    def precheck(self) -> Skip | None:
        """Decide whether there is anything to do. MUST NOT modify anything."""
        return None

    @abstractmethod
    def command(self) -> tuple[CommandStep, ...]:
        """Command steps to run, in order."""
