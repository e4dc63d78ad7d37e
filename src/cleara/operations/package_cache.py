"""Operation to clean the package manager cache."""

from __future__ import annotations

from cleara.core import package_managers
from cleara.core.package_managers import PackageManagerKind
from cleara.models.operation import Action, CommandStep, Operation, Skip
from cleara.models.run_result import Status


class PackageCacheOperation(Operation):
    """Cleans the cache of the detected package manager."""

    name = "Package Cache"
    action = Action.CLEAN_PKG_CACHE
    estimated_duration = 4.0

    def __init__(self, kind: PackageManagerKind) -> None:
        self.kind = kind
        self._manager = package_managers.get(kind)

    @property
    def message(self) -> str:
        return f"Cleaning {self.kind.value} cache..."

    def precheck(self) -> Skip | None:
        if self._manager is None:
            return Skip(Status.UNSUPPORTED, "Unsupported package manager.")
        return None

    def command(self) -> tuple[CommandStep, ...]:
        if self._manager is None:
            return ()
        return self._manager.clean_steps
