"""Shared fixtures — isolate the store in a temp home directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from acta import defaults


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Temp home directory; the store resolves to <home>/.acta."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.delenv(defaults.ENV_STORE_PATH, raising=False)
    monkeypatch.delenv(defaults.ENV_LOG_LEVEL, raising=False)
    monkeypatch.setattr(defaults, "home_dir", lambda: home)
    return home


@pytest.fixture
def store_path(home) -> Path:
    return home / defaults.FILE_NAME


@pytest.fixture
def no_home(tmp_path, monkeypatch):
    """Simulate a host that can't supply a home directory."""
    monkeypatch.delenv(defaults.ENV_STORE_PATH, raising=False)
    monkeypatch.setattr(defaults, "home_dir", lambda: None)
    return tmp_path
