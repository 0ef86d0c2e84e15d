from __future__ import annotations

import pytest

from fizzbuzz.cli import main


def test_main_without_arguments_prints_both_passes(capsys):
    assert main([]) == 0

    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert len(lines) == 198
    assert lines[14] == "15: fizzbuzz"
    assert lines[99 + 14] == "14: fizzbuzz"
    assert captured.err == ""


@pytest.mark.parametrize("argv", [["--help"], ["-h"], ["extra"], ["1", "2"]])
def test_main_ignores_arguments(capsys, argv):
    """Any argv still runs the full program and succeeds."""
    assert main(argv) == 0

    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 198
    assert captured.out.startswith("1: 1\n")
    assert captured.err == ""
