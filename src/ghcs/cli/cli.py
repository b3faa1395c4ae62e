import logging

import click

from ghcs.cli.commands.config_cmd import config_group
from ghcs.cli.commands.connect_cmd import connect_cmd
from ghcs.cli.commands.list_cmd import list_cmd
from ghcs.cli.commands.start_cmd import start_cmd
from ghcs.cli.commands.stop_cmd import stop_cmd
from ghcs.core.context import create_context
from ghcs.errors import ConfigError
from ghcs.output import error_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ghcs")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Find GitHub codespaces and connect to, start, or stop them."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            # The config commands edit the file themselves and must work when it is broken
            ctx.obj = create_context(load_config_file=ctx.invoked_subcommand != "config")
        except ConfigError as e:
            error_output(str(e))
            raise SystemExit(1) from None


cli.add_command(list_cmd)
cli.add_command(connect_cmd)
cli.add_command(start_cmd)
cli.add_command(stop_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `ghcs` console script."""
    cli()
