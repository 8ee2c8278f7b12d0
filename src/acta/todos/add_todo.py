"""Add a new pending todo."""

from __future__ import annotations

from typing import Any

from acta import store
from acta.model import Todo, TodoState
from acta.todos._helpers import _clean_content, _empty_content, _next_id


def add(content: str) -> dict[str, Any]:
    """Append a Pending todo with a freshly allocated id and save the store."""
    text = _clean_content(content)
    if text is None:
        return _empty_content()

    todos = store.load()
    todo = Todo(id=_next_id(todos), content=text, state=TodoState.PENDING)
    todos.append(todo)
    store.save(todos)
    return {"status": "added", "todo": todo.to_dict()}
