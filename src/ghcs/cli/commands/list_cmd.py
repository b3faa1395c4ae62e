"""List codespaces with their live status."""

import datetime
import json

import click
from rich.console import Console
from rich.table import Table

from ghcs.cli.errors import reports_errors
from ghcs.core.codespace.registry import build_registry
from ghcs.core.codespace.state import state_label
from ghcs.core.codespace.types import AvailableState, CodespaceState, Registry, ShutdownState
from ghcs.core.context import GhcsContext
from ghcs.output import machine_output, user_output


def _format_state(state: CodespaceState) -> str:
    """Format state with color coding."""
    if isinstance(state, AvailableState):
        return "[green]available[/green]"
    if isinstance(state, ShutdownState):
        return "[yellow]shutdown[/yellow]"
    return f"[dim]{state.raw or 'unknown'}[/dim]"


def format_relative_time(when: datetime.datetime | None, now: datetime.datetime) -> str:
    """Format a timestamp relative to now, e.g. '3d ago'."""
    if when is None:
        return "never"

    delta = now - when

    # Covers clock skew: a timestamp slightly ahead of now is a negative delta
    if delta.total_seconds() < 60:
        return "just now"
    if delta.days > 30:
        return f"{delta.days // 30}mo ago"
    elif delta.days > 0:
        return f"{delta.days}d ago"
    elif delta.seconds >= 3600:
        return f"{delta.seconds // 3600}h ago"
    elif delta.seconds >= 60:
        return f"{delta.seconds // 60}m ago"
    else:
        return "just now"


def _render_table(registry: Registry, now: datetime.datetime) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("key", style="cyan", no_wrap=True)
    table.add_column("state", no_wrap=True)
    table.add_column("repository", no_wrap=True)
    table.add_column("ref", style="dim", no_wrap=True)
    table.add_column("last used", style="dim", no_wrap=True)
    table.add_column("name", style="dim", no_wrap=True)

    for key, cs in registry.items():
        table.add_row(
            key,
            _format_state(cs.state),
            cs.repository,
            cs.ref or "",
            format_relative_time(cs.last_used_at, now),
            cs.name,
        )

    Console(stderr=True).print(table)


def _to_json(registry: Registry) -> str:
    data = [
        {
            "key": key,
            "name": cs.name,
            "display_name": cs.display_name,
            "state": state_label(cs.state),
            "repository": cs.repository,
            "ref": cs.ref,
            "last_used_at": cs.last_used_at.isoformat() if cs.last_used_at else None,
        }
        for key, cs in registry.items()
    ]
    return json.dumps(data, indent=2)


@click.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output in JSON format")
@click.pass_obj
@reports_errors
def list_cmd(ctx: GhcsContext, output_json: bool) -> None:
    """Show all codespaces and their state.

    Examples:

        ghcs list

        ghcs list --json
    """
    registry = build_registry(ctx.codespace_cli)

    if output_json:
        machine_output(_to_json(registry))
        return

    if len(registry) == 0:
        user_output("No codespaces found.")
        return

    _render_table(registry, ctx.time.now())
