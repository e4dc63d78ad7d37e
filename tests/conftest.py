"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest

from cleara.core.audit import AUDIT_LOGGER, setup_audit_log
from cleara.settings import Settings
from cleara.ui import Console

from helpers import FakeGate


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point the settings singleton at a temp file with temp audit paths."""
    settings = Settings(tmp_path / "config" / "settings.json")
    settings.set("audit.log_file", str(tmp_path / "log" / "cleara.log"))
    settings.set("audit.fallback_log_file", str(tmp_path / "home" / "cleara.log"))
    monkeypatch.setattr(Settings, "_instance", settings)
    return settings


@pytest.fixture
def audit_log(isolate_settings):
    """Configure the audit logger to write into the temp directory."""
    setup_audit_log(isolate_settings)
    yield isolate_settings.get("audit.log_file")
    logger = logging.getLogger(AUDIT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def fake_gate():
    return FakeGate()


@pytest.fixture
def console():
    return Console(color=False)
