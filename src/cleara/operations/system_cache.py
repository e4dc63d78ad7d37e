"""Operation to drop the kernel page cache."""

from __future__ import annotations

from cleara.models.operation import Action, CommandStep, Operation

_DROP_CACHES = "/proc/sys/vm/drop_caches"


class DropCacheOperation(Operation):
    """Flushes dirty pages, then drops page cache, dentries and inodes."""

    name = "System Cache"
    action = Action.DROP_CACHE
    message = "Dropping system cache..."
    estimated_duration = 3.0

    def command(self) -> tuple[CommandStep, ...]:
        return (
            CommandStep(("sync",), privileged=True),
            CommandStep(("tee", _DROP_CACHES), privileged=True, input="3\n"),
        )
