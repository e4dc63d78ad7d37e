"""Tests for the command-line interface."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cleara import cli
from cleara.core.privileges import PrivilegeGate
from cleara.models.operation import Action


class RecordingOrchestrator:
    """Stands in for the orchestrator and remembers the config it got."""

    configs: list = []

    def __init__(self, config, **kwargs):
        RecordingOrchestrator.configs.append(config)

    def run(self) -> int:
        return 0


class ExplodingOrchestrator:
    def __init__(self, *args, **kwargs):
        raise AssertionError("startup logic must not run")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def recorded(monkeypatch, isolate_settings):
    RecordingOrchestrator.configs = []
    monkeypatch.setattr(cli, "Orchestrator", RecordingOrchestrator)
    monkeypatch.setattr(cli, "setup_audit_log", lambda settings: None)
    return RecordingOrchestrator.configs


class TestShortCircuit:
    def test_version(self, runner, monkeypatch):
        monkeypatch.setattr(cli, "Orchestrator", ExplodingOrchestrator)
        result = runner.invoke(cli.main, ["-v"])
        assert result.exit_code == 0
        assert result.output.strip() == "Cleara v1.0 by raaahulllls"

    def test_long_version(self, runner, monkeypatch):
        monkeypatch.setattr(cli, "Orchestrator", ExplodingOrchestrator)
        result = runner.invoke(cli.main, ["--all", "--version"])
        assert result.exit_code == 0
        assert "Cleara v1.0" in result.output

    def test_help(self, runner, monkeypatch):
        monkeypatch.setattr(cli, "Orchestrator", ExplodingOrchestrator)
        result = runner.invoke(cli.main, ["-h"])
        assert result.exit_code == 0
        for flag in ("--all", "--tmp", "--cache", "--pkg", "--purge", "--dry-run", "--quiet", "--no-color"):
            assert flag in result.output


class TestUsageErrors:
    def test_unknown_flag(self, runner, monkeypatch):
        monkeypatch.setattr(cli, "Orchestrator", ExplodingOrchestrator)
        result = runner.invoke(cli.main, ["--bogus"])
        assert result.exit_code == 1
        assert "No such option" in result.output
        assert "Usage:" in result.output

    def test_conflicting_selectors(self, runner, monkeypatch):
        monkeypatch.setattr(cli, "Orchestrator", ExplodingOrchestrator)
        result = runner.invoke(cli.main, ["--tmp", "--pkg"])
        assert result.exit_code == 1
        assert "--tmp, --pkg" in result.output


class TestConfig:
    @pytest.mark.parametrize(
        ("flag", "action"),
        [
            ("--all", Action.ALL),
            ("--tmp", Action.CLEAN_TMP),
            ("--cache", Action.CLEAN_USER_CACHE),
            ("--pkg", Action.CLEAN_PKG_CACHE),
            ("--purge", Action.PURGE_CONFIGS),
        ],
    )
    def test_selector(self, runner, recorded, flag, action):
        result = runner.invoke(cli.main, [flag])
        assert result.exit_code == 0
        assert recorded[0].selected_action is action
        assert not recorded[0].interactive

    def test_modes(self, runner, recorded):
        result = runner.invoke(cli.main, ["--dry-run", "--quiet", "--no-color"])
        assert result.exit_code == 0
        config = recorded[0]
        assert config.dry_run and config.quiet and config.no_color
        assert config.selected_action is None
        assert config.interactive


class TestEndToEnd:
    @pytest.fixture(autouse=True)
    def _no_sudo(self, monkeypatch, audit_log):
        monkeypatch.setattr(PrivilegeGate, "ensure_elevated", lambda self: True)
        monkeypatch.setattr("cleara.core.package_managers.has_command", lambda name: name == "apt-get")

    def test_dry_run_full_cleanup(self, runner, isolate_settings):
        result = runner.invoke(cli.main, ["--all", "--dry-run", "--no-color"])

        assert result.exit_code == 0
        assert "Summary:" in result.output
        assert result.output.count("Dry Run") == 5
        log_text = open(isolate_settings.get("audit.log_file"), encoding="utf-8").read()
        assert log_text.count("[DRY RUN]") == 5

    def test_quiet_hides_summary(self, runner):
        result = runner.invoke(cli.main, ["--tmp", "--dry-run", "--quiet"])
        assert result.exit_code == 0
        assert "Summary:" not in result.output
        assert "Reclaim your speed!" not in result.output

    def test_interactive_exit(self, runner):
        result = runner.invoke(cli.main, ["--dry-run"], input="7\n2\n0\n")
        assert result.exit_code == 0
        assert "Invalid choice." in result.output
        assert "Thanks for using Cleara!" in result.output

    def test_end_of_input_aborts(self, runner):
        result = runner.invoke(cli.main, ["--dry-run"], input="")
        assert result.exit_code == 1
