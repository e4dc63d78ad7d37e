"""Operation to purge configuration left behind by removed packages.

``dpkg -l`` lists such packages with the state ``rc`` (removed, config
files remain). Systems without dpkg have nothing to purge.
"""

from __future__ import annotations

import logging

from cleara.core.commands import run_command
from cleara.models.operation import Action, CommandStep, Operation, Skip
from cleara.models.run_result import Status
from cleara.utils import has_command

log = logging.getLogger(__name__)

_ORPHAN_STATE = "rc"


def parse_dpkg_list(output: str) -> list[str]:
    """Extract package names in the ``rc`` state from ``dpkg -l`` output."""
    packages: list[str] = []
    for line in output.splitlines():
        fields = line.split()
        if len(fields) >= 2 and fields[0] == _ORPHAN_STATE:
            packages.append(fields[1])
    return packages


def find_orphaned_configs() -> list[str]:
    """Query dpkg for removed packages whose config files are still on disk."""
    if not has_command("dpkg"):
        log.debug("dpkg not found, no orphaned configs to look for")
        return []
    result = run_command(["dpkg", "-l"])
    if not result.ok:
        log.warning("dpkg -l failed (exit %d): %s", result.returncode, result.stderr.strip())
        return []
    return parse_dpkg_list(result.stdout)


class PurgeConfigsOperation(Operation):
    """Purges packages in the removed-but-configured state."""

    name = "Old Configs"
    action = Action.PURGE_CONFIGS
    message = "Purging old configs..."
    estimated_duration = 4.0

    def __init__(self) -> None:
        self._pending: list[str] = []

    def precheck(self) -> Skip | None:
        self._pending = find_orphaned_configs()
        if not self._pending:
            return Skip(Status.NONE, "No old configs to purge.")
        log.info("Found %d orphaned configs: %s", len(self._pending), ", ".join(self._pending))
        return None

    def command(self) -> tuple[CommandStep, ...]:
        if not self._pending:
            return ()
        return (CommandStep(("apt-get", "purge", "-y", *self._pending), privileged=True),)
