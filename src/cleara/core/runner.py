"""Executes a single cleanup operation."""

from __future__ import annotations

import logging

from cleara.core.audit import AUDIT_LOGGER
from cleara.core.commands import run_steps
from cleara.core.privileges import PrivilegeGate
from cleara.models.operation import Operation
from cleara.models.run_config import RunConfig
from cleara.models.run_result import RunResult, Status
from cleara.ui import Console
from cleara.utils import format_elapsed

log = logging.getLogger(__name__)


class OperationRunner:
    """Runs one operation and turns its outcome into a :class:`RunResult`.

    Every call writes exactly one audit line. Command failures and
    exceptions raised by the operation become a ``FAILED`` status and
    never propagate.
    """

    def __init__(self, gate: PrivilegeGate, console: Console, audit: logging.Logger | None = None) -> None:
        self.gate = gate
        self.console = console
        self.audit = audit or logging.getLogger(AUDIT_LOGGER)

    def run(self, op: Operation, config: RunConfig) -> RunResult:
        """Run *op* under *config*.

        Dry runs return before the precheck or any command executes.
        """
        if config.dry_run:
            self.console.info(f"{op.message} ", nl=False)
            self.console.outcome(Status.DRY_RUN)
            self.audit.info("[DRY RUN] %s", op.name)
            return RunResult(operation_name=op.name, status=Status.DRY_RUN)

        try:
            skip = op.precheck()
            if skip is not None:
                if skip.status.is_error:
                    self.console.error(skip.message)
                else:
                    self.console.warn(skip.message)
                self.audit.info("%s – %s", op.name, skip.status.label)
                return RunResult(operation_name=op.name, status=skip.status)

            steps = op.command()
            with self.console.spinner(op.message, op.estimated_duration):
                result = run_steps(steps, self.gate)
        except Exception:
            log.exception("Operation '%s' crashed", op.name)
            self.console.outcome(Status.FAILED)
            self.audit.info("%s – Failed", op.name)
            return RunResult(operation_name=op.name, status=Status.FAILED)

        if result.ok:
            status = Status.CLEARED
            self.audit.info("%s – Success", op.name)
        else:
            status = Status.FAILED
            self.audit.info("%s – Failed", op.name)
            log.info("%s failed (exit %d): %s", op.name, result.returncode, result.stderr.strip())
        self.console.outcome(status)
        log.debug("%s finished in %s", op.name, format_elapsed(result.duration))

        return RunResult(operation_name=op.name, status=status, command_result=result)
