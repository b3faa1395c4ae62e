"""Stop a running codespace."""

import click

from ghcs.cli.errors import reports_errors
from ghcs.core.codespace import actions
from ghcs.core.context import GhcsContext
from ghcs.output import user_output


@click.command("stop")
@click.argument("key", required=False)
@click.pass_obj
@reports_errors
def stop_cmd(ctx: GhcsContext, key: str | None) -> None:
    """Stop an available codespace.

    Examples:

        ghcs stop

        ghcs stop fuzzy-fox
    """
    codespace = actions.stop(ctx, key=key)
    user_output(click.style("-> ", fg="green") + f"Stopped '{codespace.display_key}'")
