"""External command execution."""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Iterable, Sequence

from cleara.core.privileges import PrivilegeGate
from cleara.models.operation import CommandStep
from cleara.models.run_result import CommandResult

log = logging.getLogger(__name__)

# Exit status reported when a command cannot be started at all.
EXIT_NOT_RUNNABLE = 127


def run_command(argv: Sequence[str], input: str | None = None) -> CommandResult:
    """Run a command to completion and capture its output.

    Never raises for command problems: a binary that cannot be started
    is reported as exit status 127 with the error in ``stderr``. Output
    that is not valid UTF-8 is decoded with replacement characters.
    """
    start = time.monotonic()
    try:
        proc = subprocess.run(
            list(argv),
            input=input,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except (OSError, subprocess.SubprocessError, ValueError) as e:
        log.debug("Cannot run %s: %s", argv[0] if argv else "<empty>", e)
        return CommandResult(
            returncode=EXIT_NOT_RUNNABLE,
            stderr=str(e),
            duration=time.monotonic() - start,
        )
    return CommandResult(
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
        duration=time.monotonic() - start,
    )


def run_steps(steps: Iterable[CommandStep], gate: PrivilegeGate) -> CommandResult:
    """Run command steps in order, stopping at the first failing one.

    Returns:
        The result of the last step that ran, with the summed duration.
        An empty step list counts as success.
    """
    result = CommandResult(returncode=0)
    total = 0.0
    for step in steps:
        argv = gate.wrap(step)
        log.debug("Running: %s", " ".join(argv))
        result = run_command(argv, input=step.input)
        total += result.duration
        if not result.ok:
            log.debug("Step failed (exit %d): %s", result.returncode, result.stderr.strip())
            break
    result.duration = total
    return result
