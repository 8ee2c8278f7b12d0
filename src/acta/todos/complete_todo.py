"""Mark a todo as completed."""

from __future__ import annotations

from typing import Any

from acta import store
from acta.model import TodoState
from acta.todos._helpers import _find_index, _not_found


def complete(todo_id: int) -> dict[str, Any]:
    """Set the todo's state to Completed.

    Already-completed todos are reported as unchanged and the store is not
    rewritten.
    """
    todos = store.load()
    index = _find_index(todos, todo_id)
    if index is None:
        return _not_found(todo_id)

    todo = todos[index]
    if todo.completed:
        return {"status": "unchanged", "todo": todo.to_dict()}

    todo.state = TodoState.COMPLETED
    store.save(todos)
    return {"status": "completed", "todo": todo.to_dict()}
