"""Free-space sampling on the root filesystem."""

from __future__ import annotations

import logging
import shutil

from cleara.utils import bytes_to_human

log = logging.getLogger(__name__)

ROOT = "/"


def sample_available(path: str = ROOT) -> int:
    """Return the bytes available to unprivileged users on *path*'s filesystem."""
    return shutil.disk_usage(path).free


def compute_freed(before: int, after: int) -> int:
    """Signed difference between two samples; positive means space was freed."""
    return after - before


def describe_freed(delta: int) -> str:
    if delta > 0:
        return f"Freed {bytes_to_human(delta)} of space."
    return "No noticeable disk space freed."
