"""
Pytest configuration and shared fixtures for strext tests.
"""

import io
import logging
from dataclasses import dataclass

import pytest

from strext.cli import COMPARISON_ENV_VAR, main


@dataclass
class CliResult:
    """Exit code and captured output of one CLI invocation."""

    code: int
    out: str
    err: str


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's comparison setting out of the tests."""
    monkeypatch.delenv(COMPARISON_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_logger_level():
    """Undo log level changes made by in-process CLI runs."""
    strext_logger = logging.getLogger("strext")
    level = strext_logger.level
    yield
    strext_logger.setLevel(level)


@pytest.fixture
def stdin(monkeypatch):
    """Factory fixture for feeding text to the CLI on stdin."""

    def _set_stdin(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set_stdin


@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI in-process and capture its output."""

    def _run(*argv: str) -> CliResult:
        code = main(list(argv))
        captured = capsys.readouterr()
        return CliResult(code=code, out=captured.out, err=captured.err)

    return _run
