"""Fake gate and operation shared by the test modules."""

from __future__ import annotations

from cleara.core.privileges import PrivilegeGate
from cleara.models.operation import Action, CommandStep, Operation, Skip


class FakeGate(PrivilegeGate):
    """Gate that never prompts and leaves commands unwrapped."""

    def __init__(self, elevated: bool = True) -> None:
        super().__init__()
        self._result = elevated
        self.calls = 0

    def ensure_elevated(self) -> bool:
        self.calls += 1
        return self._result

    def wrap(self, step: CommandStep) -> list[str]:
        return list(step.argv)


class FakeOperation(Operation):
    """Operation with a canned precheck that records what the runner asked for."""

    def __init__(
        self,
        name: str,
        action: Action,
        skip: Skip | None = None,
        steps: tuple[CommandStep, ...] = (CommandStep(("true",)),),
    ) -> None:
        self._name = name
        self._action = action
        self._skip = skip
        self._steps = steps
        self.prechecks = 0
        self.commands = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def action(self) -> Action:
        return self._action

    @property
    def message(self) -> str:
        return f"Running {self._name}..."

    @property
    def estimated_duration(self) -> float:
        return 0.0

    def precheck(self) -> Skip | None:
        self.prechecks += 1
        return self._skip

    def command(self) -> tuple[CommandStep, ...]:
        self.commands += 1
        return self._steps
