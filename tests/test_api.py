"""
Tests for the run_string / run_file helpers and options.
"""

from pathlib import Path

import pytest

from bfexec import BufferedConsole, RunOptions, RunStatus, run_file, run_string


def test_run_string_defaults():
    console = BufferedConsole()
    result = run_string("+" * 72 + ".", console=console)
    assert result.status is RunStatus.COMPLETED
    assert result.stats is None
    assert console.output == "H"


def test_run_string_with_options():
    result = run_string(">>+", options=RunOptions(cell_limit=1, verbose=True), console=BufferedConsole())
    assert result.error_kind == "ResourceLimitExceeded"
    assert result.stats is not None
    assert result.stats.right_shifts == 2


def test_run_options_validation():
    assert RunOptions().cell_limit == 256
    with pytest.raises(ValueError):
        RunOptions(cell_limit=0)


def test_run_file(tmp_path):
    path = tmp_path / "echo.bf"
    path.write_text("read , and write .\n", encoding="utf-8")
    console = BufferedConsole(["z"])
    result = run_file(path, console=console)
    assert result.ok
    assert console.output == "z"


def test_bundled_hello_example():
    path = Path(__file__).resolve().parent.parent / "examples" / "hello.bf"
    console = BufferedConsole()
    result = run_file(path, console=console)
    assert result.ok
    assert console.output == "Hello World!?"
