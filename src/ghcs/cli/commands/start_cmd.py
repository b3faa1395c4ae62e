"""Start a shutdown codespace."""

import click

from ghcs.cli.errors import reports_errors
from ghcs.core.codespace import actions
from ghcs.core.context import GhcsContext
from ghcs.output import user_output


@click.command("start")
@click.argument("key", required=False)
@click.option("--wait", is_flag=True, help="Wait until the codespace is available.")
@click.pass_obj
@reports_errors
def start_cmd(ctx: GhcsContext, key: str | None, wait: bool) -> None:
    """Start a shutdown codespace.

    Returns as soon as the start request is launched; the codespace may take
    a while to become available. Use --wait to block until it is.

    Examples:

        ghcs start

        ghcs start fuzzy-fox --wait
    """
    codespace = actions.start(ctx, key=key, wait=wait)
    if not wait:
        user_output(f"Run 'ghcs connect {codespace.display_key}' once it is available.")
