"""Central operation registry."""

from __future__ import annotations

import logging
from typing import Iterator

from cleara.models.operation import Action, Operation

log = logging.getLogger(__name__)


class OperationRegistry:
    """Stores the session's operations keyed by action, in registration order."""

    def __init__(self) -> None:
        self._operations: dict[Action, Operation] = {}

    def register(self, operation: Operation) -> None:
        """Register an operation instance."""
        if operation.action is Action.ALL:
            raise ValueError("Action.ALL is a selector, not an operation")
        if operation.action in self._operations:
            log.warning("Operation for '%s' already registered, skipping duplicate", operation.action.value)
            return
        self._operations[operation.action] = operation
        log.debug("Registered operation: %s (%s)", operation.action.value, operation.name)

    def get(self, action: Action) -> Operation | None:
        """Get the operation implementing *action*."""
        return self._operations.get(action)

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations.values())

    def __contains__(self, action: Action) -> bool:
        return action in self._operations
