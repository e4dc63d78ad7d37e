"""Tests for the operation registry."""

from __future__ import annotations

import pytest

from helpers import FakeOperation
from cleara.core.registry import OperationRegistry
from cleara.models.operation import Action


class TestOperationRegistry:
    def test_register_and_get(self):
        registry = OperationRegistry()
        op = FakeOperation("/tmp", Action.CLEAN_TMP)
        registry.register(op)

        assert registry.get(Action.CLEAN_TMP) is op
        assert Action.CLEAN_TMP in registry
        assert len(registry) == 1

    def test_duplicate_ignored(self, caplog):
        registry = OperationRegistry()
        first = FakeOperation("/tmp", Action.CLEAN_TMP)
        registry.register(first)
        registry.register(FakeOperation("/tmp again", Action.CLEAN_TMP))

        assert registry.get(Action.CLEAN_TMP) is first
        assert "already registered" in caplog.text

    def test_keeps_registration_order(self):
        registry = OperationRegistry()
        registry.register(FakeOperation("User Cache", Action.CLEAN_USER_CACHE))
        registry.register(FakeOperation("System Cache", Action.DROP_CACHE))
        assert [op.name for op in registry] == ["User Cache", "System Cache"]

    def test_all_selector_rejected(self):
        with pytest.raises(ValueError):
            OperationRegistry().register(FakeOperation("Everything", Action.ALL))

    def test_missing(self):
        assert OperationRegistry().get(Action.PURGE_CONFIGS) is None
