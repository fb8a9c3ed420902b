"""Commands for the `token` resource kind."""

import json

import click

from slack_app.cli.ensure import UserFacingCliError
from slack_app.cli.ensure_ideal import EnsureIdeal
from slack_app.context import SlackAppContext
from slack_app.output import machine_output, user_output
from slack_app.resources.schema import TOKEN_SCHEMA, redact
from slack_app.resources.types import TOKEN_KIND


@click.group("token")
def token_group() -> None:
    """Manage app configuration tokens (import only)."""


@token_group.command("create")
@click.argument("name")
@click.pass_obj
def create_token(ctx: SlackAppContext, name: str) -> None:  # noqa: ARG001
    """Always fails: tokens cannot be created, only imported."""
    EnsureIdeal.ideal_state(ctx.tokens.create())


@token_group.command("import")
@click.argument("name")
@click.argument("refresh_token")
@click.pass_obj
def import_token(ctx: SlackAppContext, name: str, refresh_token: str) -> None:
    """Track a token pair as NAME, starting from its REFRESH_TOKEN."""
    if ctx.state.get_token(name) is not None:
        raise UserFacingCliError(f"Token '{name}' is already tracked")
    ctx.state.put_token(name, ctx.tokens.import_state(refresh_token))
    user_output(click.style("✓ ", fg="green") + f"Imported token '{name}'")


@token_group.command("read")
@click.argument("name")
@click.pass_obj
def read_token(ctx: SlackAppContext, name: str) -> None:
    """Refresh the tracked token NAME."""
    record = EnsureIdeal.tracked(ctx.state.get_token(name), kind=TOKEN_KIND, name=name)
    ctx.state.put_token(name, ctx.tokens.read(record))
    user_output(f"'{name}' is up to date")


@token_group.command("update")
@click.argument("name")
@click.pass_obj
def update_token(ctx: SlackAppContext, name: str) -> None:
    """Apply changes to the tracked token NAME. Nothing is rotated yet."""
    record = EnsureIdeal.tracked(ctx.state.get_token(name), kind=TOKEN_KIND, name=name)
    ctx.state.put_token(name, ctx.tokens.update(record))
    user_output(f"'{name}' is up to date")


@token_group.command("delete")
@click.argument("name")
@click.pass_obj
def delete_token(ctx: SlackAppContext, name: str) -> None:
    """Stop tracking the token NAME. Nothing is revoked in Slack."""
    record = EnsureIdeal.tracked(ctx.state.get_token(name), kind=TOKEN_KIND, name=name)
    ctx.tokens.delete(record)
    ctx.state.remove_token(name)
    user_output(click.style("✓ ", fg="green") + f"Removed token '{name}' from state")


@token_group.command("show")
@click.argument("name")
@click.option("--show-sensitive", is_flag=True, help="Print secrets instead of redacting them.")
@click.pass_obj
def show_token(ctx: SlackAppContext, name: str, show_sensitive: bool) -> None:
    """Print the tracked state of NAME as JSON."""
    record = EnsureIdeal.tracked(ctx.state.get_token(name), kind=TOKEN_KIND, name=name)
    data = record.to_dict()
    if not show_sensitive:
        data = redact(TOKEN_SCHEMA, data)
    machine_output(json.dumps(data, indent=2))
