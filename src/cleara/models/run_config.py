"""Process-wide run configuration resolved from CLI flags."""

from __future__ import annotations

from dataclasses import dataclass

from cleara.models.operation import Action


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable options for one Cleara invocation."""

    dry_run: bool = False
    quiet: bool = False
    no_color: bool = False
    selected_action: Action | None = None

    @property
    def interactive(self) -> bool:
        """True when no selector was given and the menu loop should run."""
        return self.selected_action is None
