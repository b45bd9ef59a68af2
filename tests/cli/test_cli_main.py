"""Tests for vrow.cli main entrypoint wiring."""

from __future__ import annotations

import sys

import pytest
import typer

from vrow import cli, config


class _DummyCommand:
    def __init__(self, recorded: dict[str, object]) -> None:
        self.recorded = recorded

    def main(
        self, args: list[str], prog_name: str, standalone_mode: bool, default_map: object
    ) -> None:
        self.recorded["args"] = args
        self.recorded["prog_name"] = prog_name
        self.recorded["standalone_mode"] = standalone_mode
        self.recorded["default_map"] = default_map


def test_cli_main_builds_default_map(monkeypatch: pytest.MonkeyPatch) -> None:
    """main should load config defaults and pass default_map to Typer command."""
    recorded: dict[str, object] = {}

    monkeypatch.setattr(
        config,
        "load_cli_config",
        lambda _argv: config.LoadedCliConfig(
            defaults={"out": "json", "verbose": True, "debug": True}
        ),
    )
    monkeypatch.setattr(typer.main, "get_command", lambda _app: _DummyCommand(recorded))
    monkeypatch.setattr(cli, "DEFAULT_VERBOSE", {"value": False})
    monkeypatch.setattr(cli, "DEFAULT_DEBUG", {"value": False})
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {})
    monkeypatch.setattr(sys, "argv", ["vrow", "resolve", "--no-color", "a"])

    cli.main()

    assert recorded["args"] == ["resolve", "--no-color", "a"]
    assert recorded["prog_name"] == "vrow"
    assert recorded["standalone_mode"] is True
    assert recorded["default_map"] == {"resolve": {"out": "json"}}
    assert cli.DEFAULT_VERBOSE["value"] is True
    assert cli.DEFAULT_DEBUG["value"] is True
    assert config.CONFIG_DEFAULTS == {"out": "json"}


def test_cli_main_without_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without defaults no default_map should be passed."""
    recorded: dict[str, object] = {}

    monkeypatch.setattr(
        config, "load_cli_config", lambda _argv: config.LoadedCliConfig(defaults={})
    )
    monkeypatch.setattr(typer.main, "get_command", lambda _app: _DummyCommand(recorded))
    monkeypatch.setattr(cli, "DEFAULT_VERBOSE", {"value": False})
    monkeypatch.setattr(cli, "DEFAULT_DEBUG", {"value": False})
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {})
    monkeypatch.setattr(sys, "argv", ["vrow", "split", "a"])

    cli.main()

    assert recorded["default_map"] is None
    assert cli.DEFAULT_VERBOSE["value"] is False
    assert cli.DEFAULT_DEBUG["value"] is False
