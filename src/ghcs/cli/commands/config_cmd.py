"""Read and write ~/.ghcs/config.toml."""

import click

from ghcs.cli.errors import reports_errors
from ghcs.core.config import (
    CONFIG_KEYS,
    parse_config_value,
    read_config_values,
    set_config_value,
    unset_config_value,
)
from ghcs.core.context import GhcsContext
from ghcs.errors import ConfigError
from ghcs.output import machine_output, user_output

CONFIG_KEY_DESCRIPTIONS = {
    "default_path": "Remote directory opened by connect (default: /workspaces/<repo>)",
    "command_timeout": "Seconds before a blocking gh call is killed; 0 waits forever",
    "start_wait_timeout": "Seconds to wait for a codespace to become available",
}


def _check_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        raise ConfigError(f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}")


@click.group("config")
def config_group() -> None:
    """Manage ghcs configuration."""


@config_group.command("list")
@click.pass_obj
@reports_errors
def config_list(ctx: GhcsContext) -> None:
    """Print every config key, its value and what it does."""
    values = read_config_values(ctx.config_path)
    user_output(click.style(str(ctx.config_path), dim=True))
    for key in CONFIG_KEYS:
        value = values.get(key)
        shown = str(value) if value is not None else click.style("(not set)", dim=True)
        user_output(f"  {key} = {shown}")
        user_output(click.style(f"      {CONFIG_KEY_DESCRIPTIONS[key]}", dim=True))


@config_group.command("get")
@click.argument("key")
@click.pass_obj
@reports_errors
def config_get(ctx: GhcsContext, key: str) -> None:
    """Print the value of KEY, failing if it is not set."""
    _check_key(key)
    values = read_config_values(ctx.config_path)
    if key not in values:
        raise ConfigError(f"Key not set: {key}")
    machine_output(str(values[key]))


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@reports_errors
def config_set(ctx: GhcsContext, key: str, value: str) -> None:
    """Set KEY to VALUE."""
    _check_key(key)
    backup = set_config_value(ctx.config_path, key, parse_config_value(key, value))
    if backup is not None:
        message = f"Could not parse {ctx.config_path}; moved it to {backup}"
        user_output(click.style(message, fg="yellow"))
    user_output(f"Set {key} = {value}")


@config_group.command("unset")
@click.argument("key")
@click.pass_obj
@reports_errors
def config_unset(ctx: GhcsContext, key: str) -> None:
    """Remove KEY, restoring its default."""
    if unset_config_value(ctx.config_path, key):
        user_output(f"Unset {key}")
    else:
        user_output(f"{key} was not set")
