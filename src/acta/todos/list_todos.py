"""List todos, optionally filtered by state."""

from __future__ import annotations

from typing import Any

from acta import store
from acta.model import TodoState


def list_todos(state: TodoState | None = None) -> dict[str, Any]:
    """Return todos in stored order. state=None returns all of them."""
    todos = store.load()
    if state is not None:
        todos = [t for t in todos if t.state is state]
    return {
        "filter": state.value if state is not None else "all",
        "count": len(todos),
        "todos": [t.to_dict() for t in todos],
    }
