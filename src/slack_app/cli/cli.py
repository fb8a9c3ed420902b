import logging
from pathlib import Path

import click

from slack_app.cli.commands.manifest import manifest_group
from slack_app.cli.commands.schema import schema_cmd
from slack_app.cli.commands.state import state_group
from slack_app.cli.commands.token import token_group
from slack_app.cli.ensure import UserFacingCliError
from slack_app.config import DEFAULT_CONFIG_PATH, load_config
from slack_app.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="slack-app-manifests")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path) -> None:
    """Manage Slack app manifests as declarative resources."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        cwd = Path.cwd()
        try:
            config = load_config(config_path, cwd=cwd)
        except ValueError as e:
            raise UserFacingCliError(str(e)) from e
        ctx.obj = create_context(config)


cli.add_command(manifest_group)
cli.add_command(token_group)
cli.add_command(state_group)
cli.add_command(schema_cmd)


def main() -> None:
    """CLI entry point used by the `slack-app` console script."""
    cli()
