"""Remove a todo from the store."""

from __future__ import annotations

from typing import Any

from acta import store
from acta.todos._helpers import _find_index, _not_found


def delete(todo_id: int) -> dict[str, Any]:
    todos = store.load()
    index = _find_index(todos, todo_id)
    if index is None:
        return _not_found(todo_id)

    removed = todos.pop(index)
    store.save(todos)
    return {"status": "deleted", "todo": removed.to_dict()}
