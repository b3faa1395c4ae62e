"""Connect to a codespace via SSH."""

import click

from ghcs.cli.errors import reports_errors
from ghcs.core.codespace import actions
from ghcs.core.context import GhcsContext


@click.command("connect")
@click.argument("key", required=False)
@click.option(
    "--path",
    help="Remote directory to open. Defaults to the configured default_path, "
    "else /workspaces/<repo>.",
)
@click.pass_obj
@reports_errors
def connect_cmd(ctx: GhcsContext, key: str | None, path: str | None) -> None:
    """Open a shell on a codespace, starting it first if needed.

    KEY is the codespace's display name (or its name when it has none). Without
    KEY, choose from all codespaces interactively.

    Examples:

        ghcs connect

        ghcs connect fuzzy-fox --path /workspaces/widgets/docs
    """
    exit_code = actions.connect(ctx, key=key, path=path)
    if exit_code != 0:
        raise SystemExit(exit_code)
