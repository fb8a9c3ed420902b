"""Command that prints resource attribute metadata."""

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from slack_app.resources.schema import SCHEMAS, AttributeSchema, ResourceSchema


def _flags(attribute: AttributeSchema) -> str:
    flags = ["required" if attribute.required else "computed"]
    if attribute.sensitive:
        flags.append("sensitive")
    if attribute.deprecation is not None:
        flags.append("deprecated")
    return ", ".join(flags)


def _add_rows(table: Table, attributes: tuple[AttributeSchema, ...], prefix: str) -> None:
    for attribute in attributes:
        description = Text(attribute.description)
        if attribute.deprecation is not None:
            description.append(f"\n{attribute.deprecation}", style="yellow")
        table.add_row(f"{prefix}{attribute.name}", _flags(attribute), description)
        _add_rows(table, attribute.attributes, f"{prefix}{attribute.name}.")


def _render_schema(console: Console, schema: ResourceSchema) -> None:
    table = Table(
        title=f"{schema.kind}: {schema.description}",
        show_header=True,
        header_style="bold",
        title_justify="left",
    )
    table.add_column("Attribute", no_wrap=True)
    table.add_column("Flags", no_wrap=True)
    table.add_column("Description")
    _add_rows(table, schema.attributes, "")
    console.print(table)


@click.command("schema")
@click.argument("kind", required=False, type=click.Choice(sorted(SCHEMAS)))
def schema_cmd(kind: str | None) -> None:
    """Describe the attributes of each resource kind (or only KIND)."""
    console = Console()
    kinds = [kind] if kind is not None else sorted(SCHEMAS)
    for name in kinds:
        _render_schema(console, SCHEMAS[name])
