"""Top-level cleanup state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import click

from cleara.core import disk, package_managers
from cleara.core.audit import audit_path
from cleara.core.package_managers import PackageManagerKind
from cleara.core.privileges import PrivilegeGate
from cleara.core.registry import OperationRegistry
from cleara.core.runner import OperationRunner
from cleara.core.tracker import SummaryTracker
from cleara.models.operation import BATCH_ORDER, Action
from cleara.models.run_config import RunConfig
from cleara.models.run_result import RunResult
from cleara.operations import build_registry
from cleara.settings import Settings
from cleara.ui import Console

log = logging.getLogger(__name__)

Sampler = Callable[[str], int]
Detector = Callable[[], PackageManagerKind]
Prompt = Callable[[], str]

MENU_ACTIONS: dict[str, Action] = {
    "1": Action.DROP_CACHE,
    "2": Action.CLEAN_TMP,
    "3": Action.CLEAN_PKG_CACHE,
    "4": Action.PURGE_CONFIGS,
    "5": Action.CLEAN_USER_CACHE,
    "6": Action.ALL,
}
MENU_EXIT = "0"


class State(Enum):
    IDLE = "idle"
    DETECTING = "detecting"
    BATCH_RUNNING = "batch_running"
    SINGLE_RUNNING = "single_running"
    SUMMARIZING = "summarizing"
    EXIT = "exit"


@dataclass(slots=True)
class Session:
    """State resolved once at startup and shared by every operation."""

    config: RunConfig
    package_manager: PackageManagerKind = PackageManagerKind.UNKNOWN
    elevated: bool = False
    space_before: int | None = None


def _prompt_choice() -> str:
    return click.prompt("Select option ⌨ ", default="", show_default=False, prompt_suffix=": ")


class Orchestrator:
    """Maps CLI selectors or menu choices onto operations and reports results.

    Operations always run one after another; no failure stops a batch and
    every path ends by rendering the summary.
    """

    def __init__(
        self,
        config: RunConfig,
        *,
        console: Console | None = None,
        gate: PrivilegeGate | None = None,
        settings: Settings | None = None,
        detector: Detector = package_managers.detect,
        sampler: Sampler = disk.sample_available,
        prompt: Prompt = _prompt_choice,
    ) -> None:
        self.session = Session(config=config)
        self.console = console or Console(quiet=config.quiet, color=not config.no_color)
        self.gate = gate or PrivilegeGate()
        self.settings = settings or Settings.instance()
        self.runner = OperationRunner(self.gate, self.console)
        self.tracker = SummaryTracker()
        self.registry = OperationRegistry()
        self.state = State.IDLE
        self._detector = detector
        self._sampler = sampler
        self._prompt = prompt

    @property
    def config(self) -> RunConfig:
        return self.session.config

    def run(self) -> int:
        """Start the session and dispatch to the selected mode. Returns the exit code."""
        self.start()
        if self.config.interactive:
            return self.interactive()
        return self.run_selected()

    def start(self) -> None:
        """Detect the package manager, elevate, greet and take the first sample."""
        self.state = State.DETECTING
        self.session.package_manager = self._detector()
        self.registry = build_registry(self.session.package_manager, self.settings)

        self.session.elevated = self.gate.ensure_elevated()
        if not self.session.elevated:
            log.warning("Running without elevated privileges, system-level steps may fail")

        self.console.banner()
        self.session.space_before = self._sample()
        self.state = State.IDLE

    def run_action(self, action: Action) -> list[RunResult]:
        """Run one operation, or the full batch for ``Action.ALL``."""
        if action is Action.ALL:
            return self.run_full_cleanup()
        self.state = State.SINGLE_RUNNING
        return [self._run_operation(action)]

    def run_full_cleanup(self) -> list[RunResult]:
        """Run all five operations in order on a fresh summary."""
        self.state = State.BATCH_RUNNING
        self.tracker.reset()
        before = self._sample()
        results = [self._run_operation(action) for action in BATCH_ORDER]
        self.report_freed(before, self._sample())
        return results

    def run_selected(self) -> int:
        """Non-interactive mode: run the selector given on the command line."""
        action = self.config.selected_action
        if action is None:
            raise ValueError("run_selected() needs a selected action")
        self.run_action(action)
        if action is not Action.ALL:
            self.report_freed(self.session.space_before, self._sample())
        self.summarize()
        self.state = State.EXIT
        return 0

    def interactive(self) -> int:
        """Menu loop until the user picks Exit."""
        while True:
            self.state = State.IDLE
            self.console.menu()
            self.console.echo()
            choice = self._prompt().strip()
            self.console.echo()

            if choice == MENU_EXIT:
                self.console.farewell()
                self.state = State.EXIT
                return 0

            action = MENU_ACTIONS.get(choice)
            if action is None:
                self.console.error("Invalid choice.")
            else:
                self.run_action(action)
            self.summarize()
            self.console.echo()

    def summarize(self) -> None:
        self.state = State.SUMMARIZING
        self.console.summary(self.tracker.render())
        if self.tracker.has_errors:
            path = audit_path()
            where = f" Details are logged to {path}." if path else ""
            self.console.warn(f"Some operations did not complete.{where}")

    def report_freed(self, before: int | None, after: int | None) -> None:
        if before is None or after is None:
            self.console.warn("Could not measure freed disk space.")
            return
        delta = disk.compute_freed(before, after)
        message = disk.describe_freed(delta)
        if delta > 0:
            self.console.success(message)
        else:
            self.console.echo(click.style(message, fg="yellow", bold=True))

    def _run_operation(self, action: Action) -> RunResult:
        op = self.registry.get(action)
        if op is None:
            raise KeyError(f"No operation registered for {action.value!r}")
        result = self.runner.run(op, self.config)
        self.tracker.record_result(result)
        return result

    def _sample(self) -> int | None:
        try:
            return self._sampler(disk.ROOT)
        except OSError as e:
            log.warning("Cannot read free space of %s: %s", disk.ROOT, e)
            return None
