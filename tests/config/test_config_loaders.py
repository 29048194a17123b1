# topmark:header:start
#
#   project      : StyleMark
#   file         : test_config_loaders.py
#   file_relpath : tests/config/test_config_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, configuration discovery and rendering."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit

from stylemark.config.loaders import (
    discover_config_file,
    load_config_file,
    load_toml_dict,
    render_config_toml,
    resolve_config,
)
from stylemark.config.model import MutableRuleConfig, RuleConfig
from stylemark.core.errors import InvalidConfigError
from tests.conftest import make_config


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    path: Path = write(tmp_path / "stylemark.toml", "[rules]\nindent_width = 2\n")

    data = load_toml_dict(path)

    assert data == {"rules": {"indent_width": 2}}
    assert type(data["rules"]) is dict


def test_malformed_toml(tmp_path: Path) -> None:
    path: Path = write(tmp_path / "stylemark.toml", "[rules\nindent_width = \n")

    with pytest.raises(InvalidConfigError, match="malformed TOML") as excinfo:
        load_toml_dict(path)
    assert excinfo.value.source == str(path)


def test_unreadable_config_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfigError, match="cannot read configuration"):
        load_toml_dict(tmp_path / "absent.toml")


def test_load_pyproject_tool_section(tmp_path: Path) -> None:
    path: Path = write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.stylemark.rules]\nmax_line_length = 120\n',
    )

    layer: MutableRuleConfig = load_config_file(path)

    assert layer.max_line_length == 120
    assert layer.sources == [str(path)]


def test_load_pyproject_without_tool_section(tmp_path: Path) -> None:
    path: Path = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    assert load_config_file(path).freeze() == RuleConfig(sources=(str(path),))


def test_discovery_walks_up(tmp_path: Path) -> None:
    config: Path = write(tmp_path / "stylemark.toml", "")
    nested: Path = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert discover_config_file(nested) == config.resolve()


def test_discovery_prefers_stylemark_toml(tmp_path: Path) -> None:
    write(tmp_path / "pyproject.toml", "[tool.stylemark.rules]\nindent_width = 2\n")
    config: Path = write(tmp_path / "stylemark.toml", "")

    assert discover_config_file(tmp_path) == config.resolve()


def test_discovery_skips_pyproject_without_tool_section(tmp_path: Path) -> None:
    outer: Path = write(tmp_path / "stylemark.toml", "")
    write(tmp_path / "inner" / "pyproject.toml", '[project]\nname = "x"\n')

    assert discover_config_file(tmp_path / "inner") == outer.resolve()


def test_discovery_nearest_file_wins(tmp_path: Path) -> None:
    write(tmp_path / "stylemark.toml", "")
    inner: Path = write(tmp_path / "inner" / "pyproject.toml", "[tool.stylemark]\n")

    assert discover_config_file(tmp_path / "inner") == inner.resolve()


def test_resolve_config_layers(tmp_path: Path) -> None:
    write(tmp_path / "stylemark.toml", "[rules]\nmax_line_length = 100\nindent_width = 2\n")
    explicit: Path = write(tmp_path / "ci.toml", "[rules]\nindent_width = 8\n")
    overrides = MutableRuleConfig(max_line_length=90)

    config: RuleConfig = resolve_config(
        config_file=explicit, start=tmp_path, overrides=overrides
    )

    assert config.max_line_length == 90
    assert config.indent_width == 8
    assert config.sources == (str((tmp_path / "stylemark.toml").resolve()), str(explicit))


def test_resolve_config_without_discovery(tmp_path: Path) -> None:
    write(tmp_path / "stylemark.toml", "[rules]\nindent_width = 2\n")

    assert resolve_config(discover=False, start=tmp_path) == RuleConfig()


def test_explicit_file_equal_to_discovered_is_loaded_once(tmp_path: Path) -> None:
    path: Path = write(tmp_path / "stylemark.toml", '[rules]\ndisable = ["LineTooLong"]\n')

    config: RuleConfig = resolve_config(config_file=path.resolve(), start=tmp_path)

    assert config.sources == (str(path.resolve()),)


def test_resolve_config_validates(tmp_path: Path) -> None:
    write(tmp_path / "stylemark.toml", "[rules]\nindent_width = 12\n")

    with pytest.raises(InvalidConfigError, match="indent_width"):
        resolve_config(start=tmp_path)


def test_render_config_toml_round_trips() -> None:
    config: RuleConfig = make_config(disabled_rules=["TabIndentation", "LineTooLong"])

    text: str = render_config_toml(config)

    assert text.startswith("# Sources: built-in defaults")
    assert tomlkit.parse(text).unwrap() == config.to_toml_dict()
    assert config.to_toml_dict()["rules"]["disable"] == ["LineTooLong", "TabIndentation"]
