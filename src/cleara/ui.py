"""Terminal output: banner, menu, summary table and progress spinner."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from types import TracebackType

import click

from cleara.models.run_result import Status

_STATUS_COLORS = {
    Status.CLEARED: "green",
    Status.ALREADY_CLEAN: "yellow",
    Status.NONE: "yellow",
    Status.FAILED: "red",
    Status.DRY_RUN: "yellow",
    Status.UNSUPPORTED: "red",
}

MENU_ITEMS = (
    ("1", "Drop system cache"),
    ("2", "Clean /tmp"),
    ("3", "Clean package cache"),
    ("4", "Purge old configs"),
    ("5", "Clean user/global cache"),
    ("6", "Clean everything"),
    ("0", "Exit"),
)


class Spinner:
    """Animated progress indicator running in its own thread.

    The spinner only ticks; the caller runs the real work and leaves the
    ``with`` block when it completes. Past ``estimated_duration`` the line
    gains a "still working" hint instead of stopping.
    """

    FRAMES = "|/-\\"
    HINT = " still working..."
    INTERVAL = 0.1

    def __init__(self, console: Console, message: str, estimated_duration: float) -> None:
        self._console = console
        self._message = message
        self._estimated = estimated_duration
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._start = 0.0

    @property
    def animated(self) -> bool:
        return not self._console.quiet and sys.stdout.isatty()

    def __enter__(self) -> Spinner:
        self._start = time.monotonic()
        self._console.info(click.style(self._message, fg="cyan", bold=True) + " ", nl=False)
        if self.animated:
            self._thread = threading.Thread(target=self._spin, name="cleara-spinner", daemon=True)
            self._thread.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            # Blank out the frame and hint, leave the cursor after the label.
            self._draw(" " * (len(self.HINT) + 1))
            self._draw("")

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._start

    def _spin(self) -> None:
        for frame in itertools.cycle(self.FRAMES):
            self._draw(frame + (self.HINT if self.elapsed > self._estimated else ""))
            if self._stop.wait(self.INTERVAL):
                return

    def _draw(self, tail: str) -> None:
        label = click.style(self._message, fg="cyan", bold=True)
        self._console.echo(f"\r{label} {tail}", nl=False)


class Console:
    """Thin wrapper over click.echo honouring the quiet and no-color flags."""

    def __init__(self, quiet: bool = False, color: bool = True) -> None:
        self.quiet = quiet
        # None lets click decide based on whether the stream is a terminal.
        self._color: bool | None = None if color else False

    def echo(self, message: str = "", *, err: bool = False, nl: bool = True) -> None:
        """Print unconditionally."""
        click.echo(message, err=err, nl=nl, color=self._color)

    def info(self, message: str = "", *, nl: bool = True) -> None:
        """Print unless running quietly."""
        if not self.quiet:
            self.echo(message, nl=nl)

    def success(self, message: str) -> None:
        self.echo(click.style(message, fg="green", bold=True))

    def warn(self, message: str) -> None:
        self.info(click.style(message, fg="yellow", bold=True))

    def error(self, message: str) -> None:
        self.echo(click.style(message, fg="red", bold=True))

    def spinner(self, message: str, estimated_duration: float) -> Spinner:
        return Spinner(self, message, estimated_duration)

    def outcome(self, status: Status) -> None:
        """Finish a spinner line with the operation's outcome."""
        match status:
            case Status.CLEARED:
                self.info(click.style("✅ Done", fg="green", bold=True))
            case Status.DRY_RUN:
                self.info(click.style("[DRY RUN]", fg="yellow", bold=True))
            case _:
                self.info(click.style("❌ Failed", fg="red", bold=True))

    def banner(self) -> None:
        if self.quiet:
            return
        style = {"fg": "yellow", "bold": True}
        self.echo(click.style("╭─────────────╮", **style))
        self.echo(click.style("│  Cleara 🚀  │", **style))
        self.echo(click.style("╰─────────────╯", **style))
        self.echo(click.style("Reclaim your speed!", fg="cyan", bold=True))
        self.echo()

    def menu(self) -> None:
        for key, label in MENU_ITEMS:
            self.echo(f"{click.style(key + ')', fg='cyan', bold=True)} {click.style(label, fg='white', dim=True)}")

    def summary(self, rows: list[tuple[str, Status]]) -> None:
        """Draw the operation/status table."""
        if self.quiet:
            return
        self.echo()
        self.echo(click.style("Summary:", fg="cyan", bold=True))
        self.echo("┌───────────────────────┬───────────────┐")
        self.echo("│ Operation             │ Status        │")
        self.echo("├───────────────────────┼───────────────┤")
        for name, status in rows:
            label = click.style(f"{status.label:<13}", fg=_STATUS_COLORS[status])
            self.echo(f"│ {name:<21} │ {label} │")
        self.echo("└───────────────────────┴───────────────┘")

    def farewell(self) -> None:
        self.success("Cleaning done, speed gained! 🚀")
        self.success("Thanks for using Cleara!")
