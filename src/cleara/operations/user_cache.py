"""Operation to clear the user cache directory and global cache directories."""

from __future__ import annotations

from pathlib import Path

from cleara.models.operation import Action, CommandStep, Operation
from cleara.utils import clear_directory_step, xdg_cache_home

DEFAULT_GLOBAL_DIRS = (Path("/var/cache/apt"), Path("/var/cache/man"))


class UserCacheOperation(Operation):
    """Empties ~/.cache and selected directories under /var/cache."""

    name = "User Cache"
    action = Action.CLEAN_USER_CACHE
    message = "Cleaning user/system cache..."
    estimated_duration = 3.0

    def __init__(
        self,
        user_cache_dir: Path | None = None,
        global_dirs: tuple[Path, ...] = DEFAULT_GLOBAL_DIRS,
    ) -> None:
        self.user_cache_dir = user_cache_dir or xdg_cache_home()
        self.global_dirs = tuple(global_dirs)

    def command(self) -> tuple[CommandStep, ...]:
        steps: list[CommandStep] = []
        if self.user_cache_dir.is_dir():
            steps.append(clear_directory_step(self.user_cache_dir))
        steps += [clear_directory_step(d, privileged=True) for d in self.global_dirs if d.is_dir()]
        return tuple(steps)
