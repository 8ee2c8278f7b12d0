"""Typed failures raised by the storage layer.

Each failure kind carries the lower-level error it wraps (also chained as
``__cause__`` by the raiser) so the CLI can show it to the user.
"""

from __future__ import annotations


class ActaError(Exception):
    """Base class for every storage failure."""


class HomeDirectoryUnresolved(ActaError):
    """The host environment cannot supply a home directory."""

    def __init__(self) -> None:
        super().__init__("Could not find home directory")


class StoreIOError(ActaError):
    """Reading, writing or creating the store file failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"IO error: {error}")


class StoreParseError(ActaError):
    """Store content is not valid JSON, doesn't match the record schema,
    or an in-memory value couldn't be serialized."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"Parse error: {error}")
