"""Output helpers.

user_output() writes status and error messages to stderr; machine_output()
writes results (JSON, tables) to stdout so they can be piped.
"""

import click


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write a result to stdout."""
    click.echo(message)
