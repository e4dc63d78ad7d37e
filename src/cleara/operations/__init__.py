"""Built-in cleanup operations."""

from __future__ import annotations

from pathlib import Path

from cleara.core.package_managers import PackageManagerKind
from cleara.core.registry import OperationRegistry
from cleara.operations.old_configs import PurgeConfigsOperation
from cleara.operations.package_cache import PackageCacheOperation
from cleara.operations.system_cache import DropCacheOperation
from cleara.operations.tmp_files import TmpOperation
from cleara.operations.user_cache import UserCacheOperation
from cleara.settings import Settings

__all__ = [
    "DropCacheOperation",
    "PackageCacheOperation",
    "PurgeConfigsOperation",
    "TmpOperation",
    "UserCacheOperation",
    "build_registry",
]


def build_registry(kind: PackageManagerKind, settings: Settings | None = None) -> OperationRegistry:
    """Register the five operations in full-cleanup order."""
    settings = settings or Settings.instance()
    registry = OperationRegistry()
    registry.register(DropCacheOperation())
    registry.register(TmpOperation(preserve=tuple(settings.get("tmp.preserve", []))))
    registry.register(PackageCacheOperation(kind))
    registry.register(PurgeConfigsOperation())
    registry.register(
        UserCacheOperation(global_dirs=tuple(Path(d) for d in settings.get("cache.global_dirs", [])))
    )
    return registry
