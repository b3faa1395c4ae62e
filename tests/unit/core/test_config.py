"""Tests for loading and writing config.toml."""

from pathlib import Path

import pytest

from ghcs.core.config import (
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_START_WAIT_TIMEOUT,
    GhcsConfig,
    config_path,
    load_config,
    parse_config_value,
    read_config_values,
    set_config_value,
    unset_config_value,
)
from ghcs.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "config.toml")

    assert config == GhcsConfig()
    assert config.default_path is None
    assert config.command_timeout == DEFAULT_COMMAND_TIMEOUT
    assert config.start_wait_timeout == DEFAULT_START_WAIT_TIMEOUT


def test_loads_values(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'default_path = "/workspaces/mono"\ncommand_timeout = 30\nstart_wait_timeout = 60\n',
        encoding="utf-8",
    )

    config = load_config(path)

    assert config == GhcsConfig(
        default_path="/workspaces/mono", command_timeout=30.0, start_wait_timeout=60
    )


def test_zero_timeout_disables_it(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("command_timeout = 0\n", encoding="utf-8")

    assert load_config(path).command_timeout is None


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('future_option = "x"\n', encoding="utf-8")

    assert load_config(path) == GhcsConfig()


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("default_path = \n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_wrong_type_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('start_wait_timeout = "soon"\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_config_path_honors_ghcs_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GHCS_HOME", str(tmp_path))

    assert config_path() == tmp_path / "config.toml"


def test_set_preserves_comments(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("# my settings\ncommand_timeout = 30\n", encoding="utf-8")

    set_config_value(path, "default_path", "/workspaces/mono")

    content = path.read_text(encoding="utf-8")
    assert "# my settings" in content
    assert read_config_values(path) == {
        "default_path": "/workspaces/mono",
        "command_timeout": 30,
    }


def test_set_creates_parent_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"

    set_config_value(path, "start_wait_timeout", 45)

    assert load_config(path).start_wait_timeout == 45


def test_set_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        set_config_value(tmp_path / "config.toml", "editor", "vim")


def test_unset(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    set_config_value(path, "default_path", "/workspaces/mono")

    assert unset_config_value(path, "default_path") is True
    assert unset_config_value(path, "default_path") is False
    assert load_config(path).default_path is None


@pytest.mark.parametrize(
    ("key", "raw", "expected"),
    [
        ("default_path", "/srv", "/srv"),
        ("command_timeout", "2.5", 2.5),
        ("command_timeout", "0", 0.0),
        ("start_wait_timeout", "90", 90),
    ],
)
def test_parse_config_value(key: str, raw: str, expected: object) -> None:
    assert parse_config_value(key, raw) == expected


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("command_timeout", "soon"),
        ("command_timeout", "-1"),
        ("start_wait_timeout", "1.5"),
        ("start_wait_timeout", "0"),
        ("default_path", " "),
    ],
)
def test_parse_config_value_rejects(key: str, raw: str) -> None:
    with pytest.raises(ConfigError):
        parse_config_value(key, raw)


def test_set_moves_unparseable_file_aside(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("default_path = \n", encoding="utf-8")

    backup = set_config_value(path, "default_path", "/x")

    assert backup == tmp_path / "config.toml.bak"
    assert backup.read_text(encoding="utf-8") == "default_path = \n"
    assert load_config(path).default_path == "/x"


def test_set_on_valid_file_returns_no_backup(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"

    assert set_config_value(path, "default_path", "/x") is None
    assert not (tmp_path / "config.toml.bak").exists()
