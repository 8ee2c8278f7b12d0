"""Todo operations — one load/mutate/save cycle per command.

Each function returns a result dict for the output layer. Validation and
lookup problems come back as ``{"error": ...}``; storage failures propagate
as ``acta.errors.ActaError``.
"""

from .add_todo import add
from .complete_todo import complete
from .delete_todo import delete
from .edit_todo import edit
from .export_todos import EXPORT_FORMATS, export
from .list_todos import list_todos

__all__: list[str] = [
    "EXPORT_FORMATS",
    "add",
    "complete",
    "delete",
    "edit",
    "export",
    "list_todos",
]
