"""Tests for the Todo record and its JSON mapping."""

from __future__ import annotations

import pytest

from acta.model import Todo, TodoState


def test_defaults_to_pending():
    todo = Todo(id=1, content="a")
    assert todo.state is TodoState.PENDING
    assert not todo.completed


def test_to_dict_uses_state_tags():
    assert Todo(id=2, content="b", state=TodoState.COMPLETED).to_dict() == {
        "id": 2,
        "content": "b",
        "state": "Completed",
    }


def test_from_dict():
    todo = Todo.from_dict({"id": 0, "content": "", "state": "Pending"})
    assert todo == Todo(id=0, content="", state=TodoState.PENDING)


@pytest.mark.parametrize(
    "raw, message",
    [
        ([], "expected an object"),
        ({"id": 1, "content": "a"}, "missing field(s): state"),
        ({"id": 1.5, "content": "a", "state": "Pending"}, "invalid id"),
        ({"id": False, "content": "a", "state": "Pending"}, "invalid id"),
        ({"id": 1, "content": None, "state": "Pending"}, "invalid content"),
        ({"id": 1, "content": "a", "state": "pending"}, "invalid state"),
    ],
)
def test_from_dict_rejects(raw, message):
    with pytest.raises(ValueError) as exc_info:
        Todo.from_dict(raw)
    assert message in str(exc_info.value)
