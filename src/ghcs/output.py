"""Output helpers separating user-facing messages from machine output.

User messages (progress, errors, tables) go to stderr so that stdout stays
clean for JSON that scripts may pipe elsewhere.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Write an error message with a red ``Error:`` prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
