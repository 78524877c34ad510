"""Config command for Quicknote CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ..config import bootstrap_config_file
from ._common import QuicknoteCliError


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Open the Quicknote configuration file in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or config_module.DEFAULT_CONFIG_PATH

    created = bootstrap_config_file(config_path)

    try:
        click.edit(filename=str(config_path))
    except click.ClickException as exc:
        raise QuicknoteCliError(f"Error opening editor: {exc}") from exc

    if created:
        click.echo(f"Created configuration at {config_path}")
    else:
        click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
