"""Precondition failures reported to the CLI user."""

import click


class UserFacingCliError(click.ClickException):
    """A precondition failed; Click prints `Error: <message>` and exits 1."""
