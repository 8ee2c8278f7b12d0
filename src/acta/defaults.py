"""Shared constants — env var names, default filename, resolvers.

Single source of truth for where the store lives. Everything resolves
lazily so env vars and the home directory are read at call time.
"""

from __future__ import annotations

import os
from pathlib import Path

from acta.errors import HomeDirectoryUnresolved

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_STORE_PATH = "ACTA_STORE_PATH"
ENV_LOG_LEVEL = "ACTA_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Store filename inside the user's home directory
FILE_NAME = ".acta"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def _passwd_home() -> str | None:
    """Home directory from the passwd entry of the current user (POSIX only)."""
    try:
        import pwd
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except (ImportError, AttributeError, KeyError):
        return None


def home_dir() -> Path | None:
    """Return the user's home directory, or None if the host can't supply one.

    An empty HOME counts as unset and falls back to the passwd entry.
    """
    if os.environ.get("HOME") == "":
        home = _passwd_home()
        return Path(home) if home else None
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def resolve_store_path() -> Path:
    """Resolve the store path: ENV_STORE_PATH > ~/.acta."""
    explicit = os.getenv(ENV_STORE_PATH, "").strip()
    if explicit:
        return Path(explicit).expanduser()
    home = home_dir()
    if home is None:
        raise HomeDirectoryUnresolved()
    return home / FILE_NAME


def resolve_log_level(verbose: bool = False) -> str:
    """Resolve log level: --verbose > ENV_LOG_LEVEL > WARNING."""
    if verbose:
        return "DEBUG"
    level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level
