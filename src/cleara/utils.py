"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from cleara.models.operation import CommandStep

log = logging.getLogger(__name__)


def has_command(name: str) -> bool:
    """Check if a command is resolvable on PATH."""
    return shutil.which(name) is not None


def xdg_cache_home() -> Path:
    """Return XDG_CACHE_HOME, defaulting to ~/.cache."""
    return Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def has_entries(path: Path) -> bool:
    """Whether *path* is a directory with at least one entry."""
    try:
        return path.is_dir() and any(path.iterdir())
    except OSError:
        log.debug("Cannot read directory: %s", path)
        return False


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"


def clear_directory_step(
    directory: Path,
    *,
    exclude: tuple[str, ...] = (),
    privileged: bool = False,
) -> CommandStep:
    """Build a step removing every entry of *directory* but not the directory itself.

    Entries named in *exclude* (and anything below them) are kept. The
    ``-mindepth 1 -maxdepth 1`` bounds keep removal inside *directory*.
    """
    argv: list[str] = ["find", str(directory), "-mindepth", "1", "-maxdepth", "1"]
    for name in exclude:
        argv += ["!", "-path", f"{directory / name}*"]
    argv += ["-exec", "rm", "-rf", "{}", "+"]
    return CommandStep(tuple(argv), privileged=privileged)
