"""Commands for inspecting tracked state."""

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from slack_app.context import SlackAppContext
from slack_app.output import user_output
from slack_app.resources.types import ManifestRecord
from slack_app.state.abc import StateEntry


def _describe(entry: StateEntry) -> Text:
    record = entry.record
    if not isinstance(record, ManifestRecord):
        return Text("imported token", style="dim")
    if record.manifest is None:
        return Text("not read yet", style="yellow")
    if record.credentials is None:
        return Text("imported (no credentials)", style="dim")
    return Text("created")


@click.group("state")
def state_group() -> None:
    """Inspect tracked resources."""


@state_group.command("list")
@click.pass_obj
def list_state(ctx: SlackAppContext) -> None:
    """List every tracked resource."""
    entries = ctx.state.list_entries()
    if not entries:
        user_output("No resources tracked.")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Origin", no_wrap=False)

    for entry in entries:
        record_id = entry.record.id
        table.add_row(
            entry.kind,
            Text(entry.name, style="bold"),
            record_id if record_id is not None else Text("unknown", style="dim"),
            _describe(entry),
        )

    Console().print(table)
