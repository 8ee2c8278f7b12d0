"""JSON file store — the persistence layer behind every acta command.

The whole todo list lives in a single JSON array (default ``~/.acta``).
Every operation is a whole-file read or a whole-file replace; there is no
in-place patching and no in-memory cache between calls.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from acta.defaults import resolve_store_path
from acta.errors import StoreIOError, StoreParseError
from acta.fs import atomic_write_file
from acta.model import Todo

log = logging.getLogger(__name__)

EMPTY_STORE = "[]"


def init() -> Path:
    """Ensure the store file exists and return its path.

    Creates the file with an empty list if it's missing and leaves an
    existing file untouched, so repeated calls are idempotent.

    Raises:
        HomeDirectoryUnresolved: The home directory can't be determined.
        StoreIOError: The file can't be created.
    """
    path = resolve_store_path()
    if path.exists():
        return path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(EMPTY_STORE, encoding="utf-8")
    except OSError as exc:
        raise StoreIOError(exc) from exc
    log.info("created empty store at %s", path)
    return path


def load() -> list[Todo]:
    """Read every todo from the store, in stored order.

    Raises:
        HomeDirectoryUnresolved: The home directory can't be determined.
        StoreIOError: The file can't be read.
        StoreParseError: The content isn't a JSON array of todo records.
    """
    path = init()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise StoreParseError(exc) from exc
    except OSError as exc:
        raise StoreIOError(exc) from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StoreParseError(exc) from exc
    if not isinstance(raw, list):
        raise StoreParseError(ValueError(f"expected a JSON array at top level, got {type(raw).__name__}"))

    todos: list[Todo] = []
    for index, item in enumerate(raw):
        try:
            todos.append(Todo.from_dict(item))
        except ValueError as exc:
            raise StoreParseError(ValueError(f"record {index}: {exc}")) from exc

    log.debug("loaded %d todos from %s", len(todos), path)
    return todos


def save(todos: Iterable[Todo]) -> None:
    """Replace the store's full content with the given todos.

    Raises:
        HomeDirectoryUnresolved: The home directory can't be determined.
        StoreParseError: The todos can't be serialized.
        StoreIOError: The file can't be written.
    """
    path = init()
    records = [todo.to_dict() for todo in todos]
    try:
        serialized = json.dumps(records, indent=2, ensure_ascii=False)
        # Lone surrogates survive dumps but not the UTF-8 write
        serialized.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise StoreParseError(exc) from exc

    try:
        atomic_write_file(path, serialized)
    except OSError as exc:
        raise StoreIOError(exc) from exc
    log.debug("saved %d todos to %s", len(records), path)
