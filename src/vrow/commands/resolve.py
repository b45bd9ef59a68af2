"""Resolve command turning call text into AST output."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from vrow import config as config_module
from vrow.color import build_console, should_use_color
from vrow.output_format import (
    DEFAULT_OUTPUT_THEME,
    OutputFormat,
    OutputFormatError,
    get_resolve_formatter,
    print_prepared_output,
)
from vrow.virtual_row import VirtualRowError, evaluate_call_text


@dataclass
class ResolveArgs:
    """Arguments for the resolve command."""

    call_text: str
    config: str
    color_flag: bool | None
    out: str
    out_theme: str


def run_resolve(args: ResolveArgs) -> None:
    """Run the resolve command."""
    color_enabled = should_use_color(args.color_flag)
    console = build_console(color_enabled)
    try:
        formatter = get_resolve_formatter(args.out)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        value = evaluate_call_text(args.call_text)
    except VirtualRowError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        prepared_output = formatter.prepare(value, color_enabled, args.out_theme)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    print_prepared_output(console, prepared_output)


def register(app: typer.Typer) -> None:
    """Register the resolve command."""

    @app.command("resolve")
    def resolve_command(
        call_text: str = typer.Argument(
            ..., metavar="CALL", help="Call text, e.g. 'count(DISTINCT, col1){}'"
        ),
        config: str = typer.Option(
            config_module.DEFAULT_CONFIG_NAME,
            "--config",
            metavar="FILE",
            help="Config file name to load from current directory",
        ),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
        out: str = typer.Option(
            OutputFormat.TREE,
            "--out",
            help="Output format: tree, json or repr",
        ),
        out_theme: str = typer.Option(
            DEFAULT_OUTPUT_THEME,
            "--out-theme",
            help="Syntax theme for highlighted output blocks",
        ),
    ) -> None:
        """Resolve call text into an expression AST."""
        args = ResolveArgs(
            call_text=call_text,
            config=config,
            color_flag=color_flag,
            out=out,
            out_theme=out_theme,
        )
        config_module.log_applied_config_defaults("resolve")
        config_module.log_command_arguments(args, "resolve")
        run_resolve(args)
