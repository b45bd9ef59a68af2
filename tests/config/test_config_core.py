"""Tests for vrow.config helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
import typer

from vrow import config


def test_load_config_missing_file_returns_empty(tmp_path: Path) -> None:
    """Missing config should return empty config without error."""
    missing = tmp_path / "missing.json"
    data, malformed = config.load_config(str(missing))

    assert data == {}
    assert malformed is False


def test_load_config_directory_path_is_malformed(tmp_path: Path) -> None:
    """Directory path should be treated as malformed config."""
    config_dir = tmp_path / "cfgdir"
    config_dir.mkdir()
    data, malformed = config.load_config(str(config_dir))

    assert data == {}
    assert malformed is True


def test_load_config_non_dict_is_malformed(tmp_path: Path) -> None:
    """Non-object JSON should be marked malformed."""
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    data, malformed = config.load_config(str(config_path))

    assert data == {}
    assert malformed is True


def test_parse_color_defaults_conflict() -> None:
    """Conflicting color flags should be rejected."""
    defaults, valid = config.parse_color_defaults({"--color": True, "--no-color": True})

    assert defaults == {}
    assert valid is False


def test_parse_color_defaults_no_color() -> None:
    """--no-color true should set color_flag to False."""
    defaults, valid = config.parse_color_defaults({"--no-color": True})

    assert defaults == {"color_flag": False}
    assert valid is True


def test_build_config_defaults_valid_values() -> None:
    """Known options should map to their destinations."""
    defaults = config.build_config_defaults(
        {
            "--out": "json",
            "--out-theme": "monokai",
            "--verbose": True,
            "--debug": False,
            "--color": True,
        }
    )

    assert defaults == {
        "out": "json",
        "out_theme": "monokai",
        "verbose": True,
        "debug": False,
        "color_flag": True,
    }


@pytest.mark.parametrize(
    "raw",
    [
        {"--out": "yaml"},
        {"--out": " "},
        {"--verbose": "yes"},
        {"--debug": 1},
        {"--max-results": 3},
        {"--color": "on"},
    ],
)
def test_build_config_defaults_invalid_values(raw: dict[str, object]) -> None:
    """Unknown keys and invalid values should make config malformed."""
    assert config.build_config_defaults(raw) is None


def test_parse_config_sections_rejects_unknown_sections() -> None:
    """Only the defaults section is accepted."""
    assert config.parse_config_sections({"filter": {}}) is None
    assert config.parse_config_sections({"defaults": []}) is None
    assert config.parse_config_sections({}) == {}


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["vrow", "resolve", "a"], ".vrow.json"),
        (["vrow", "resolve", "--config", "custom.json", "a"], "custom.json"),
        (["vrow", "resolve", "--config=other.json", "a"], "other.json"),
    ],
)
def test_parse_config_argument(argv: list[str], expected: str) -> None:
    """The config path should be read from argv."""
    assert config.parse_config_argument(argv) == expected


def test_load_cli_config_reads_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Config file defaults should be loaded from the working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".vrow.json").write_text(
        json.dumps({"defaults": {"--out": "repr", "--verbose": True}}), encoding="utf-8"
    )

    loaded = config.load_cli_config(["vrow", "resolve", "a"])

    assert loaded.defaults == {"out": "repr", "verbose": True}


def test_load_cli_config_malformed_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Malformed config should raise BadParameter."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".vrow.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(typer.BadParameter, match="Malformed config"):
        config.load_cli_config(["vrow", "resolve", "a"])


def test_build_default_map_excludes_global_options() -> None:
    """verbose and debug are global options and not part of the resolve defaults."""
    default_map = config.build_default_map({"out": "json", "verbose": True, "debug": True})

    assert default_map == {"resolve": {"out": "json"}}


def test_log_applied_config_defaults(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Applied defaults should be logged at INFO."""
    monkeypatch.setattr(logging.getLogger("vrow"), "propagate", True)
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {"out": "json"})
    caplog.set_level(logging.INFO, logger="vrow")

    config.log_applied_config_defaults("resolve")

    assert "Config defaults applied (resolve): --out='json'" in caplog.text


def test_log_command_arguments(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Command arguments should be logged sorted by name."""
    monkeypatch.setattr(logging.getLogger("vrow"), "propagate", True)
    caplog.set_level(logging.INFO, logger="vrow")

    config.log_command_arguments(SimpleNamespace(out="tree", call_text="a"), "resolve")

    assert "Command arguments (resolve): call_text='a', out='tree'" in caplog.text
