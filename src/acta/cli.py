"""Click CLI entrypoint — `acta <subcommand>`.

Every call is stateless: parse arguments, ensure the store exists, run one
load/mutate/save cycle, print the result. JSON output by default, --human
for a readable listing.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import click

from acta import store
from acta.defaults import resolve_log_level
from acta.errors import ActaError
from acta.model import TodoState
from acta.output import output

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr at the resolved level."""
    level = resolve_log_level(verbose)
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


def _call(ctx: click.Context, handler: Callable[..., dict[str, Any]], *args: Any) -> dict[str, Any]:
    """Ensure the store exists, then run handler. Storage failures become error dicts."""
    try:
        store.init()
        return handler(*args)
    except ActaError as exc:
        log.debug("storage failure in %s", ctx.info_name, exc_info=True)
        return {"error": str(exc)}


def _run(ctx: click.Context, handler: Callable[..., dict[str, Any]], *args: Any) -> None:
    output(_call(ctx, handler, *args), ctx.obj["human"])


@click.group(invoke_without_command=True)
@click.version_option(package_name="acta")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr")
@click.pass_context
def cli(ctx: click.Context, human: bool, verbose: bool) -> None:
    """acta — personal todo tracking."""
    ctx.ensure_object(dict)
    ctx.obj["human"] = human
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        # Reserved for the interactive mode
        click.echo("Interactive mode has not been implemented yet", err=True)
        ctx.exit(1)


@cli.command("list")
@click.option("-c", "--completed", is_flag=True, help="Only completed todos")
@click.option("-p", "--pending", is_flag=True, help="Only pending todos")
@click.pass_context
def list_cmd(ctx: click.Context, completed: bool, pending: bool) -> None:
    """List todos (all by default)."""
    if completed and pending:
        raise click.UsageError("--completed and --pending are mutually exclusive", ctx=ctx)
    state: TodoState | None = None
    if completed:
        state = TodoState.COMPLETED
    elif pending:
        state = TodoState.PENDING
    from acta.todos import list_todos
    _run(ctx, list_todos, state)


@cli.command()
@click.option("-t", "--todo", "content", required=True, help="Todo text")
@click.pass_context
def add(ctx: click.Context, content: str) -> None:
    """Add a pending todo."""
    from acta.todos import add as _add
    _run(ctx, _add, content)


@cli.command()
@click.option("-i", "--id", "todo_id", required=True, type=click.IntRange(min=0))
@click.pass_context
def complete(ctx: click.Context, todo_id: int) -> None:
    """Mark a todo as completed."""
    from acta.todos import complete as _complete
    _run(ctx, _complete, todo_id)


@cli.command()
@click.option("-i", "--id", "todo_id", required=True, type=click.IntRange(min=0))
@click.option("-t", "--todo", "content", required=True, help="New todo text")
@click.pass_context
def edit(ctx: click.Context, todo_id: int, content: str) -> None:
    """Replace a todo's text."""
    from acta.todos import edit as _edit
    _run(ctx, _edit, todo_id, content)


@cli.command()
@click.option("-i", "--id", "todo_id", required=True, type=click.IntRange(min=0))
@click.pass_context
def delete(ctx: click.Context, todo_id: int) -> None:
    """Delete a todo."""
    from acta.todos import delete as _delete
    _run(ctx, _delete, todo_id)


@cli.command()
@click.option("-f", "--format", "fmt", type=click.Choice(["json", "yaml", "markdown"]), default="json",
              show_default=True, help="Export format")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False), default=None,
              help="Write to a file instead of stdout")
@click.pass_context
def export(ctx: click.Context, fmt: str, output_path: str | None) -> None:
    """Export every todo as JSON, YAML, or a markdown task list."""
    from acta.todos import export as _export
    result = _call(ctx, _export, fmt, output_path)
    if "document" in result:
        click.echo(result["document"], nl=False)
        return
    output(result, ctx.obj["human"])


if __name__ == "__main__":
    cli()
