"""Tests for the resolve command runner."""

from __future__ import annotations

import click
import pytest

from vrow.commands import resolve


def _args(call_text: str, out: str = "repr") -> resolve.ResolveArgs:
    return resolve.ResolveArgs(
        call_text=call_text,
        config=".vrow.json",
        color_flag=False,
        out=out,
        out_theme="",
    )


def test_run_resolve_prints_repr(capsys: pytest.CaptureFixture[str]) -> None:
    """run_resolve should print the resolved node."""
    resolve.run_resolve(_args("lit(\"1 = 1\")"))

    assert capsys.readouterr().out.strip() == "LiteralString(text='1 = 1')"


def test_run_resolve_wraps_resolution_errors() -> None:
    """Resolution errors become click usage errors."""
    with pytest.raises(click.UsageError, match="requires arguments"):
        resolve.run_resolve(_args("count(DISTINCT){}"))


def test_run_resolve_wraps_format_errors() -> None:
    """Unknown formats become click usage errors."""
    with pytest.raises(click.UsageError, match="Unknown output format"):
        resolve.run_resolve(_args("a", out="xml"))
