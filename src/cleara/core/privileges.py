"""Privilege escalation via sudo for root-requiring commands."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from cleara.models.operation import CommandStep

log = logging.getLogger(__name__)

# Timeout for the interactive `sudo -v` prompt (seconds).
_SUDO_TIMEOUT = 300


def is_root() -> bool:
    """Check if the current process is running as root."""
    return os.geteuid() == 0


def sudo_available() -> bool:
    """Check if sudo is available on the system."""
    return shutil.which("sudo") is not None


class PrivilegeGate:
    """Acquires sudo credentials once and wraps privileged commands.

    Failing to elevate is not fatal: privileged steps still run through
    ``sudo -n`` and fail at the command layer, which the runner records
    as a failed operation.
    """

    def __init__(self) -> None:
        self._elevated: bool | None = None

    @property
    def elevated(self) -> bool | None:
        """Result of the last elevation attempt, None if never attempted."""
        return self._elevated

    def ensure_elevated(self) -> bool:
        """Make sure privileged commands can run, prompting for a password once.

        Returns:
            True when running as root or sudo credentials are cached,
            False when sudo is missing or the user declined.
        """
        if self._elevated is not None:
            return self._elevated
        self._elevated = self._elevate()
        return self._elevated

    def _elevate(self) -> bool:
        if is_root():
            return True
        if not sudo_available():
            log.warning("sudo not available, privileged operations will fail")
            return False
        try:
            proc = subprocess.run(["sudo", "-v"], timeout=_SUDO_TIMEOUT)
        except subprocess.TimeoutExpired:
            log.warning("sudo authentication timed out")
            return False
        except OSError as e:
            log.warning("Could not run sudo: %s", e)
            return False
        if proc.returncode != 0:
            log.warning("sudo authentication failed (exit %d)", proc.returncode)
            return False
        return True

    def wrap(self, step: CommandStep) -> list[str]:
        """Return the argv to execute for *step*."""
        if step.privileged and not is_root():
            return ["sudo", "-n", *step.argv]
        return list(step.argv)
