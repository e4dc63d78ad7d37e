"""Package manager detection and cache-cleaning commands.

Supporting another package manager means adding a row to
:data:`PACKAGE_MANAGERS`; detection follows the table order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from cleara.models.operation import CommandStep
from cleara.utils import has_command

log = logging.getLogger(__name__)


class PackageManagerKind(Enum):
    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class PackageManager:
    """A supported package manager and how to clean its cache."""

    kind: PackageManagerKind
    binary: str
    clean_steps: tuple[CommandStep, ...]


PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager(
        kind=PackageManagerKind.APT,
        binary="apt-get",
        clean_steps=(
            CommandStep(("apt-get", "autoremove", "-y"), privileged=True),
            CommandStep(("apt-get", "autoclean", "-y"), privileged=True),
            CommandStep(("apt-get", "clean", "-y"), privileged=True),
        ),
    ),
    PackageManager(
        kind=PackageManagerKind.DNF,
        binary="dnf",
        clean_steps=(CommandStep(("dnf", "clean", "all", "-y"), privileged=True),),
    ),
    PackageManager(
        kind=PackageManagerKind.PACMAN,
        binary="pacman",
        clean_steps=(CommandStep(("pacman", "-Scc", "--noconfirm"), privileged=True),),
    ),
    PackageManager(
        kind=PackageManagerKind.ZYPPER,
        binary="zypper",
        clean_steps=(CommandStep(("zypper", "clean", "-a"), privileged=True),),
    ),
)


def detect() -> PackageManagerKind:
    """Return the first package manager whose binary is on PATH."""
    for manager in PACKAGE_MANAGERS:
        if has_command(manager.binary):
            log.debug("Detected package manager: %s", manager.kind.value)
            return manager.kind
    log.info("No supported package manager found")
    return PackageManagerKind.UNKNOWN


def get(kind: PackageManagerKind) -> PackageManager | None:
    """Look up the table row for *kind*, None for ``UNKNOWN``."""
    for manager in PACKAGE_MANAGERS:
        if manager.kind is kind:
            return manager
    return None
