"""CLI output formatting — JSON and human-readable modes."""
from __future__ import annotations

import json
import sys

import click


def output(data: dict[str, object], human: bool = False) -> None:
    """Print result as JSON (default) or human-readable text.

    Error dicts go to stderr and exit 1.
    """
    if "error" in data:
        click.echo(json.dumps(data, indent=2, default=str), err=True)
        sys.exit(1)
    if human:
        click.echo(_format_human(data))
    else:
        click.echo(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def _format_todo(todo: dict[str, object]) -> str:
    mark = "x" if todo.get("state") == "Completed" else " "
    return f"[{mark}] {todo.get('id'):>4}  {todo.get('content')}"


def _format_human(data: dict[str, object]) -> str:
    """Format a result dict as a short listing for people."""
    lines: list[str] = []

    # Listing
    todos = data.get("todos")
    if isinstance(todos, list):
        if not todos:
            lines.append("No todos.")
        for t in todos:
            if isinstance(t, dict):
                lines.append(_format_todo(t))
        return "\n".join(lines)

    # Single-record result
    status = data.get("status")
    todo = data.get("todo")
    if isinstance(todo, dict):
        if status:
            lines.append(f"{status}:")
        lines.append(_format_todo(todo))
        return "\n".join(lines)

    for k, v in data.items():
        if isinstance(v, (list, dict)):
            lines.append(f"{k}: {json.dumps(v, indent=2, default=str)}")
        else:
            lines.append(f"{k}: {v}")
    return "\n".join(lines)
