"""Commands for the `manifest` resource kind."""

import json
import logging
from pathlib import Path

import click

from slack_app.cli.ensure import UserFacingCliError
from slack_app.cli.ensure_ideal import EnsureIdeal
from slack_app.context import SlackAppContext
from slack_app.output import machine_output, user_output
from slack_app.resources.compare import manifests_equal, parse_manifest
from slack_app.resources.schema import MANIFEST_SCHEMA, redact
from slack_app.resources.types import MANIFEST_KIND, ManifestRecord

logger = logging.getLogger(__name__)

_manifest_file = click.option(
    "--file",
    "manifest_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a JSON app manifest.",
)


def _read_manifest_file(path: Path) -> str:
    """Read a manifest file, rejecting anything that is not a JSON object."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise UserFacingCliError(f"{path} is not valid UTF-8: {e.reason}") from e
    if not isinstance(parse_manifest(text), dict):
        raise UserFacingCliError(f"{path} does not contain a JSON object")
    return text


def _require_untracked(ctx: SlackAppContext, name: str) -> None:
    if ctx.state.get_manifest(name) is not None:
        raise UserFacingCliError(
            f"Manifest '{name}' is already tracked; use 'update' or 'apply' instead"
        )


def _create(ctx: SlackAppContext, name: str, manifest: str) -> ManifestRecord:
    record = EnsureIdeal.ideal_state(ctx.manifests.create(manifest))
    ctx.state.put_manifest(name, record)
    user_output(click.style("✓ ", fg="green") + f"Created app {record.id} for '{name}'")
    if record.oauth_authorize_url is not None:
        user_output(f"  OAuth authorize URL: {record.oauth_authorize_url}")
    return record


def _update(ctx: SlackAppContext, name: str, record: ManifestRecord, manifest: str) -> None:
    updated = EnsureIdeal.ideal_state(ctx.manifests.update(record, manifest))
    ctx.state.put_manifest(name, updated)
    user_output(click.style("✓ ", fg="green") + f"Updated app {updated.id} for '{name}'")


@click.group("manifest")
def manifest_group() -> None:
    """Manage Slack app manifests."""


@manifest_group.command("create")
@click.argument("name")
@_manifest_file
@click.pass_obj
def create_manifest(ctx: SlackAppContext, name: str, manifest_file: Path) -> None:
    """Create a new Slack app from a manifest and track it as NAME."""
    _require_untracked(ctx, name)
    _create(ctx, name, _read_manifest_file(manifest_file))


@manifest_group.command("read")
@click.argument("name")
@click.pass_obj
def read_manifest(ctx: SlackAppContext, name: str) -> None:
    """Refresh NAME from Slack's exported manifest."""
    record = EnsureIdeal.tracked(ctx.state.get_manifest(name), kind=MANIFEST_KIND, name=name)
    refreshed = EnsureIdeal.ideal_state(ctx.manifests.read(record))
    ctx.state.put_manifest(name, refreshed)

    if refreshed.manifest == record.manifest:
        user_output(f"'{name}' is up to date")
    else:
        user_output(click.style("! ", fg="yellow") + f"'{name}' changed outside this tool")


@manifest_group.command("update")
@click.argument("name")
@_manifest_file
@click.pass_obj
def update_manifest(ctx: SlackAppContext, name: str, manifest_file: Path) -> None:
    """Replace the manifest of NAME."""
    record = EnsureIdeal.tracked(ctx.state.get_manifest(name), kind=MANIFEST_KIND, name=name)
    _update(ctx, name, record, _read_manifest_file(manifest_file))


@manifest_group.command("apply")
@click.argument("name")
@_manifest_file
@click.pass_obj
def apply_manifest(ctx: SlackAppContext, name: str, manifest_file: Path) -> None:
    """Create NAME, or update it when the manifest differs.

    The tracked app is refreshed from Slack first, then compared to the file
    structurally, so key order and whitespace never trigger an update.
    """
    desired = _read_manifest_file(manifest_file)
    record = ctx.state.get_manifest(name)
    if record is None:
        _create(ctx, name, desired)
        return

    refreshed = EnsureIdeal.ideal_state(ctx.manifests.read(record))
    ctx.state.put_manifest(name, refreshed)
    if manifests_equal(refreshed.manifest, desired):
        user_output(f"No changes. '{name}' matches {manifest_file}")
        return

    logger.debug("manifest for '%s' differs from %s", name, manifest_file)
    _update(ctx, name, refreshed, desired)


@manifest_group.command("delete")
@click.argument("name")
@click.pass_obj
def delete_manifest(ctx: SlackAppContext, name: str) -> None:
    """Permanently delete the Slack app tracked as NAME."""
    record = EnsureIdeal.tracked(ctx.state.get_manifest(name), kind=MANIFEST_KIND, name=name)
    EnsureIdeal.ideal_state(ctx.manifests.delete(record))
    ctx.state.remove_manifest(name)
    user_output(click.style("✓ ", fg="green") + f"Deleted app {record.id}")


@manifest_group.command("import")
@click.argument("name")
@click.argument("app_id")
@click.pass_obj
def import_manifest(ctx: SlackAppContext, name: str, app_id: str) -> None:
    """Track an existing Slack app APP_ID as NAME.

    Credentials and the OAuth authorize URL are only returned when an app is
    created, so they stay empty for imported apps.
    """
    _require_untracked(ctx, name)
    record = EnsureIdeal.ideal_state(ctx.manifests.read(ctx.manifests.import_state(app_id)))
    ctx.state.put_manifest(name, record)
    user_output(click.style("✓ ", fg="green") + f"Imported app {app_id} as '{name}'")


@manifest_group.command("show")
@click.argument("name")
@click.option("--show-sensitive", is_flag=True, help="Print secrets instead of redacting them.")
@click.pass_obj
def show_manifest(ctx: SlackAppContext, name: str, show_sensitive: bool) -> None:
    """Print the tracked state of NAME as JSON."""
    record = EnsureIdeal.tracked(ctx.state.get_manifest(name), kind=MANIFEST_KIND, name=name)
    data = record.to_dict()
    if not show_sensitive:
        data = redact(MANIFEST_SCHEMA, data)
    machine_output(json.dumps(data, indent=2))
