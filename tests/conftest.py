"""Shared fixtures for the whole test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep FIBTEMP_* variables and any local .env file out of every test."""
    for key in list(os.environ):
        if key.startswith("FIBTEMP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
