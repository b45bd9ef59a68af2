"""Split command showing how a name is split into identifier segments."""

from __future__ import annotations

import click
import typer

from vrow.virtual_row import VirtualRowError, is_operator, split_name


def run_split(name: str) -> list[str]:
    """Return output lines describing the segments of name."""
    if is_operator(name):
        raise click.UsageError(f"{name!r} is a reserved operator name")
    try:
        segments = split_name(name)
    except VirtualRowError as exc:
        raise click.UsageError(str(exc)) from exc

    match segments:
        case (table, column):
            return [f"table: {table}", f"column: {column}"]
        case _:
            return [f"identifier: {segments[0]}"]


def register(app: typer.Typer) -> None:
    """Register the split command."""

    @app.command("split")
    def split_command(
        name: str = typer.Argument(..., metavar="NAME", help="Name such as items__id"),
    ) -> None:
        """Show the identifier segments of a name."""
        for line in run_split(name):
            typer.echo(line)
