"""Tests for shared utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from cleara.utils import bytes_to_human, clear_directory_step, format_elapsed, has_entries


@pytest.mark.parametrize(
    "seconds, expected",
    [(0.25, "250 ms"), (4.2, "4.2s"), (125, "2m 5s")],
)
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected


@pytest.mark.parametrize(
    "size, expected",
    [(0, "0 B"), (512, "512 B"), (1536, "1.5 KB"), (-2048, "-2.0 KB")],
)
def test_bytes_to_human(size, expected):
    assert bytes_to_human(size) == expected


def test_has_entries(tmp_path):
    assert not has_entries(tmp_path)
    assert not has_entries(tmp_path / "missing")
    (tmp_path / "file").touch()
    assert has_entries(tmp_path)


def test_clear_directory_step_excludes():
    step = clear_directory_step(Path("/tmp"), exclude=(".X11-unix",), privileged=True)

    assert step.privileged
    assert step.argv[:6] == ("find", "/tmp", "-mindepth", "1", "-maxdepth", "1")
    assert ("!", "-path", "/tmp/.X11-unix*") == step.argv[6:9]
    assert step.argv[-5:] == ("-exec", "rm", "-rf", "{}", "+")
