"""Export the store as JSON, YAML, or a markdown task list."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import yaml

from acta import store
from acta.fs import atomic_write_file
from acta.model import Todo


def _to_json(todos: list[Todo]) -> str:
    return json.dumps([t.to_dict() for t in todos], indent=2, ensure_ascii=False) + "\n"


def _to_yaml(todos: list[Todo]) -> str:
    return yaml.safe_dump(
        [t.to_dict() for t in todos],
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def _to_markdown(todos: list[Todo]) -> str:
    """GitHub-style task list: ``- [x] #3 ship it``."""
    lines = ["# Todos", ""]
    if not todos:
        lines.append("_No todos._")
    for t in todos:
        mark = "x" if t.completed else " "
        lines.append(f"- [{mark}] #{t.id} {t.content}")
    return "\n".join(lines) + "\n"


EXPORT_FORMATS: dict[str, Callable[[list[Todo]], str]] = {
    "json": _to_json,
    "yaml": _to_yaml,
    "markdown": _to_markdown,
}


def export(fmt: str = "json", output: str | Path | None = None) -> dict[str, Any]:
    """Render every todo in the given format.

    Without output, the rendered text is returned under "document". With
    output, it's written atomically to that path instead.
    """
    if fmt not in EXPORT_FORMATS:
        return {"error": f"Invalid format '{fmt}'. Valid: {', '.join(sorted(EXPORT_FORMATS))}"}

    todos = store.load()
    document = EXPORT_FORMATS[fmt](todos)

    if output is None:
        return {"format": fmt, "count": len(todos), "document": document}

    path = Path(output).expanduser()
    try:
        atomic_write_file(path, document)
    except (OSError, UnicodeError) as exc:
        return {"error": f"Cannot write export to {path}: {exc}"}
    return {"status": "exported", "format": fmt, "count": len(todos), "path": str(path)}
