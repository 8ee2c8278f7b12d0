"""Shared helpers for todo operations."""

from __future__ import annotations

from typing import Any

from acta.model import Todo


def _find_index(todos: list[Todo], todo_id: int) -> int | None:
    """Position of the first todo with the given id, or None."""
    for i, todo in enumerate(todos):
        if todo.id == todo_id:
            return i
    return None


def _next_id(todos: list[Todo]) -> int:
    """Allocate an id one past the current maximum (1 for an empty store)."""
    return max((t.id for t in todos), default=0) + 1


def _clean_content(content: str) -> str | None:
    """Strip content; None if nothing is left."""
    text = content.strip()
    return text or None


def _not_found(todo_id: int) -> dict[str, Any]:
    return {"error": f"Todo {todo_id} not found"}


def _empty_content() -> dict[str, Any]:
    return {"error": "Todo content cannot be empty"}
