"""Replace the content of an existing todo."""

from __future__ import annotations

from typing import Any

from acta import store
from acta.todos._helpers import _clean_content, _empty_content, _find_index, _not_found


def edit(todo_id: int, content: str) -> dict[str, Any]:
    """Swap in new content; id and state are kept."""
    text = _clean_content(content)
    if text is None:
        return _empty_content()

    todos = store.load()
    index = _find_index(todos, todo_id)
    if index is None:
        return _not_found(todo_id)

    todo = todos[index]
    previous = todo.content
    todo.content = text
    store.save(todos)
    return {"status": "edited", "todo": todo.to_dict(), "previous_content": previous}
