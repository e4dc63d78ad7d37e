"""Operation to clear /tmp."""

from __future__ import annotations

from pathlib import Path

from cleara.models.operation import Action, CommandStep, Operation, Skip
from cleara.models.run_result import Status
from cleara.utils import clear_directory_step, has_entries

TMP_DIR = Path("/tmp")
# X server sockets; removing them breaks running graphical sessions.
DEFAULT_PRESERVE = (".X11-unix",)


class TmpOperation(Operation):
    """Removes every entry of /tmp except reserved display-server paths."""

    name = "/tmp"
    action = Action.CLEAN_TMP
    message = "Cleaning /tmp..."
    estimated_duration = 3.0

    def __init__(self, tmp_dir: Path = TMP_DIR, preserve: tuple[str, ...] = DEFAULT_PRESERVE) -> None:
        self.tmp_dir = tmp_dir
        self.preserve = tuple(preserve)

    def precheck(self) -> Skip | None:
        if not has_entries(self.tmp_dir):
            return Skip(Status.ALREADY_CLEAN, f"{self.tmp_dir} is already clean.")
        return None

    def command(self) -> tuple[CommandStep, ...]:
        return (clear_directory_step(self.tmp_dir, exclude=self.preserve, privileged=True),)
