"""Tests for store path and log level resolution."""

from __future__ import annotations

import pytest

from acta import defaults
from acta.errors import HomeDirectoryUnresolved


def test_store_in_home(home):
    assert defaults.resolve_store_path() == home / ".acta"


def test_env_override_wins(home, tmp_path, monkeypatch):
    monkeypatch.setenv(defaults.ENV_STORE_PATH, str(tmp_path / "x.json"))
    assert defaults.resolve_store_path() == tmp_path / "x.json"


def test_blank_env_override_ignored(home, monkeypatch):
    monkeypatch.setenv(defaults.ENV_STORE_PATH, "   ")
    assert defaults.resolve_store_path() == home / ".acta"


def test_env_override_skips_home_lookup(no_home, monkeypatch):
    monkeypatch.setenv(defaults.ENV_STORE_PATH, str(no_home / "x.json"))
    assert defaults.resolve_store_path() == no_home / "x.json"


def test_unresolved_home(no_home):
    with pytest.raises(HomeDirectoryUnresolved):
        defaults.resolve_store_path()


def test_home_dir_none_when_host_cannot_supply(monkeypatch):
    def _boom():
        raise RuntimeError("Could not determine home directory.")
    monkeypatch.setattr(defaults.Path, "home", staticmethod(_boom))
    assert defaults.home_dir() is None


class TestLogLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv(defaults.ENV_LOG_LEVEL, raising=False)
        assert defaults.resolve_log_level() == "WARNING"

    def test_verbose_forces_debug(self, monkeypatch):
        monkeypatch.setenv(defaults.ENV_LOG_LEVEL, "ERROR")
        assert defaults.resolve_log_level(verbose=True) == "DEBUG"

    def test_env(self, monkeypatch):
        monkeypatch.setenv(defaults.ENV_LOG_LEVEL, "info")
        assert defaults.resolve_log_level() == "INFO"

    def test_unknown_env_falls_back(self, monkeypatch):
        monkeypatch.setenv(defaults.ENV_LOG_LEVEL, "chatty")
        assert defaults.resolve_log_level() == "WARNING"


class TestEmptyHome:
    def test_falls_back_to_passwd_entry(self, monkeypatch):
        monkeypatch.setenv("HOME", "")
        monkeypatch.setattr(defaults, "_passwd_home", lambda: "/home/someone")
        assert defaults.home_dir() == defaults.Path("/home/someone")

    def test_unresolved_without_passwd_entry(self, monkeypatch):
        monkeypatch.setenv("HOME", "")
        monkeypatch.delenv(defaults.ENV_STORE_PATH, raising=False)
        monkeypatch.setattr(defaults, "_passwd_home", lambda: None)
        assert defaults.home_dir() is None
        with pytest.raises(HomeDirectoryUnresolved):
            defaults.resolve_store_path()
