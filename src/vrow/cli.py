#!/usr/bin/env python
"""CLI interface for vrow - virtual row call resolution."""

from __future__ import annotations

import sys

import typer

from vrow import config, logging_config
from vrow.commands import resolve, split


app = typer.Typer(
    help="Resolve virtual row calls into query expression AST nodes.",
    no_args_is_help=True,
)


DEFAULT_VERBOSE: dict[str, bool] = {"value": False}
DEFAULT_DEBUG: dict[str, bool] = {"value": False}


def _resolve_flag(flag: bool | None, default: dict[str, bool]) -> bool:
    if flag is None:
        return default["value"]
    return flag


@app.callback()
def main_callback(
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging output",
    ),
    debug: bool | None = typer.Option(
        None,
        "--debug",
        help="Also log every resolved invocation",
    ),
) -> None:
    """Global CLI options."""
    resolved_verbose = _resolve_flag(verbose, DEFAULT_VERBOSE)
    resolved_debug = _resolve_flag(debug, DEFAULT_DEBUG)
    if verbose is None and debug is None and not (resolved_verbose or resolved_debug):
        return
    logging_config.configure_logging(resolved_verbose, resolved_debug)


resolve.register(app)
split.register(app)


def main() -> None:
    """Main CLI entry point."""
    loaded_config = config.load_cli_config(sys.argv)
    defaults = dict(loaded_config.defaults)
    DEFAULT_VERBOSE["value"] = bool(defaults.pop("verbose", False))
    DEFAULT_DEBUG["value"] = bool(defaults.pop("debug", False))
    config.CONFIG_DEFAULTS.clear()
    config.CONFIG_DEFAULTS.update(defaults)

    command = typer.main.get_command(app)
    default_map = config.build_default_map(defaults) if defaults else None
    command.main(
        args=sys.argv[1:],
        prog_name="vrow",
        standalone_mode=True,
        default_map=default_map,
    )


if __name__ == "__main__":
    main()
