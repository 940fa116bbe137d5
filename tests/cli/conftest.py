"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cli_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set environment variables that widen the evaluator and round conversions."""
    env = {
        "FIBTEMP_VALUE_BITS": "64",
        "FIBTEMP_PRECISION": "0",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
