"""User configuration stored in ~/.ghcs/config.toml.

Example config:
  # Remote directory opened by `ghcs connect` (default: /workspaces/<repo>)
  default_path = "/workspaces/monorepo"

  # Seconds before a blocking gh call is killed; 0 waits forever
  command_timeout = 120

  # Seconds `connect` and `start --wait` wait for a codespace to be available
  start_wait_timeout = 300
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

from ghcs.errors import ConfigError

DEFAULT_COMMAND_TIMEOUT = 120.0
DEFAULT_START_WAIT_TIMEOUT = 300

CONFIG_KEYS = ("default_path", "command_timeout", "start_wait_timeout")


@dataclass(frozen=True)
class GhcsConfig:
    """In-memory representation of config.toml."""

    default_path: str | None = None
    command_timeout: float | None = DEFAULT_COMMAND_TIMEOUT
    start_wait_timeout: int = DEFAULT_START_WAIT_TIMEOUT


def config_path() -> Path:
    """Location of config.toml; GHCS_HOME overrides the ~/.ghcs directory."""
    home = os.environ.get("GHCS_HOME")
    base = Path(home) if home else Path.home() / ".ghcs"
    return base / "config.toml"


def _coerce(key: str, value: Any) -> Any:
    """Validate one config value, returning its normalized form."""
    if key == "default_path":
        if not isinstance(value, str) or not value.strip():
            raise ConfigError("default_path must be a non-empty string")
        return value
    if key == "command_timeout":
        if isinstance(value, bool) or not isinstance(value, int | float) or value < 0:
            raise ConfigError("command_timeout must be a number of seconds >= 0")
        return float(value)
    if key == "start_wait_timeout":
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError("start_wait_timeout must be a whole number of seconds > 0")
        return value
    raise ConfigError(f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}")


def parse_config_value(key: str, raw: str) -> str | int | float:
    """Convert a command-line string to the type stored for key."""
    if key == "command_timeout":
        try:
            return _coerce(key, float(raw))
        except ValueError:
            raise ConfigError(f"command_timeout must be a number, got '{raw}'") from None
    if key == "start_wait_timeout":
        try:
            return _coerce(key, int(raw))
        except ValueError:
            raise ConfigError(f"start_wait_timeout must be a whole number, got '{raw}'") from None
    return _coerce(key, raw)


def _read(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def load_config(path: Path) -> GhcsConfig:
    """Load config.toml if present; otherwise return defaults.

    Unknown keys are ignored so older versions can read newer files.
    """
    data = _read(path)

    default_path = data.get("default_path")
    if default_path is not None:
        default_path = _coerce("default_path", default_path)

    command_timeout: float | None = DEFAULT_COMMAND_TIMEOUT
    if "command_timeout" in data:
        command_timeout = _coerce("command_timeout", data["command_timeout"]) or None

    start_wait_timeout = DEFAULT_START_WAIT_TIMEOUT
    if "start_wait_timeout" in data:
        start_wait_timeout = _coerce("start_wait_timeout", data["start_wait_timeout"])

    return GhcsConfig(
        default_path=default_path,
        command_timeout=command_timeout,
        start_wait_timeout=start_wait_timeout,
    )


def read_config_values(path: Path) -> dict[str, Any]:
    """Raw values explicitly set in the config file, restricted to known keys."""
    data = _read(path)
    return {key: data[key] for key in CONFIG_KEYS if key in data}


def _load_document(path: Path) -> tomlkit.TOMLDocument:
    if not path.exists():
        return tomlkit.document()
    try:
        return tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, ParseError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def set_config_value(path: Path, key: str, value: str | int | float) -> Path | None:
    """Write one key, preserving the rest of the file including comments.

    A file that cannot be parsed is moved aside to `config.toml.bak` and
    replaced by a fresh one holding only this key.

    Returns:
        The backup path if the existing file was moved aside, else None
    """
    _coerce(key, value)
    backup: Path | None = None
    try:
        doc = _load_document(path)
    except ConfigError:
        backup = path.with_name(path.name + ".bak")
        try:
            path.replace(backup)
        except OSError as e:
            raise ConfigError(f"Could not move {path} aside: {e}") from e
        doc = tomlkit.document()
    doc[key] = value
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return backup


def unset_config_value(path: Path, key: str) -> bool:
    """Remove one key. Returns False if it was not set."""
    if key not in CONFIG_KEYS:
        raise ConfigError(f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}")
    doc = _load_document(path)
    if key not in doc:
        return False
    del doc[key]
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return True
