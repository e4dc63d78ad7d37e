"""Tracks operation outcomes for the session summary."""

from __future__ import annotations

import logging

from cleara.models.run_result import RunResult, Status

log = logging.getLogger(__name__)


class SummaryTracker:
    """Ordered record of each operation's most recent outcome.

    Backed by an insertion-ordered dict: a name keeps the position of its
    first record and its status is overwritten by later ones, so the
    summary never lists an operation twice.
    """

    def __init__(self) -> None:
        self._ledger: dict[str, Status] = {}

    def record(self, name: str, status: Status) -> None:
        """Record the latest status for *name*."""
        self._ledger[name] = status
        log.debug("Summary: %s = %s", name, status.label)

    def record_result(self, result: RunResult) -> None:
        """Record the status carried by a run result."""
        self.record(result.operation_name, result.status)

    def reset(self) -> None:
        """Forget everything. Only done at the start of a full cleanup."""
        self._ledger.clear()

    def render(self) -> list[tuple[str, Status]]:
        """Return (name, status) pairs in first-recorded order."""
        return list(self._ledger.items())

    def status_of(self, name: str) -> Status | None:
        return self._ledger.get(name)

    @property
    def has_errors(self) -> bool:
        return any(status.is_error for status in self._ledger.values())

    def __len__(self) -> int:
        return len(self._ledger)

    def __contains__(self, name: str) -> bool:
        return name in self._ledger
