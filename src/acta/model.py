"""Todo record and state — the data model shared across acta."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TodoState(str, Enum):
    """Lifecycle state of a todo. Values are the on-disk tags."""

    PENDING = "Pending"
    COMPLETED = "Completed"


@dataclass
class Todo:
    """A single todo item."""

    id: int
    content: str
    state: TodoState = TodoState.PENDING

    @property
    def completed(self) -> bool:
        return self.state is TodoState.COMPLETED

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "content": self.content, "state": self.state.value}

    @classmethod
    def from_dict(cls, raw: Any) -> Todo:
        """Build a Todo from one decoded JSON element.

        Raises ValueError when the element doesn't match the record schema.
        Unknown extra keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")
        missing = {"id", "content", "state"} - raw.keys()
        if missing:
            raise ValueError(f"missing field(s): {', '.join(sorted(missing))}")

        todo_id = raw["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(todo_id, bool) or not isinstance(todo_id, int) or todo_id < 0:
            raise ValueError(f"invalid id {todo_id!r}: expected a non-negative integer")

        content = raw["content"]
        if not isinstance(content, str):
            raise ValueError(f"invalid content for id {todo_id}: expected a string")

        try:
            state = TodoState(raw["state"])
        except ValueError:
            valid = ", ".join(s.value for s in TodoState)
            raise ValueError(f"invalid state {raw['state']!r} for id {todo_id}. Valid: {valid}") from None

        return cls(id=todo_id, content=content, state=state)
