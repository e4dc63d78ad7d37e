"""Tests for console output helpers."""

from __future__ import annotations

import time

from cleara.models.run_result import Status
from cleara.ui import Console, Spinner


class TestConsole:
    def test_summary_table(self, capsys):
        Console(color=False).summary([("System Cache", Status.CLEARED), ("/tmp", Status.ALREADY_CLEAN)])
        out = capsys.readouterr().out
        assert "Summary:" in out
        assert "│ System Cache          │ Cleared       │" in out
        assert "│ /tmp                  │ Already Clean │" in out

    def test_quiet_suppresses_info_not_echo(self, capsys):
        console = Console(quiet=True, color=False)
        console.banner()
        console.info("hidden")
        console.summary([("/tmp", Status.CLEARED)])
        console.echo("shown")
        assert capsys.readouterr().out == "shown\n"

    def test_no_color_strips_styles(self, capsys):
        Console(color=False).error("Invalid choice.")
        assert capsys.readouterr().out == "Invalid choice.\n"

    def test_menu(self, capsys):
        Console(color=False).menu()
        out = capsys.readouterr().out
        assert "6) Clean everything" in out
        assert "0) Exit" in out


class TestSpinner:
    def test_static_when_not_a_terminal(self, capsys):
        with Console(color=False).spinner("Cleaning /tmp...", 3.0) as spinner:
            pass
        assert not spinner.animated
        assert capsys.readouterr().out == "Cleaning /tmp... "

    def test_runs_until_work_finishes(self, monkeypatch, capsys):
        monkeypatch.setattr(Spinner, "animated", property(lambda self: True))
        with Console(color=False).spinner("Dropping system cache...", 0.0) as spinner:
            time.sleep(0.25)
        assert spinner._thread is not None
        assert not spinner._thread.is_alive()
        assert "still working..." in capsys.readouterr().out
