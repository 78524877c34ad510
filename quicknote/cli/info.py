"""Info command for Quicknote CLI."""

from __future__ import annotations

import click

from ..config import QuicknoteConfig
from ..notes import list_note_files
from ._common import get_app


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display the notes directory and the effective configuration."""

    app = get_app(ctx)
    config: QuicknoteConfig = app.config

    source = config.source_path or "(environment and defaults only)"
    total_notes = len(list_note_files(config.notes_dir))

    click.echo("Quicknote info:\n")
    click.echo(f"  Config file : {source}")
    click.echo(f"  Notes dir   : {config.notes_dir}")
    click.echo(f"  Total notes : {total_notes}")
    click.echo("\nConfiguration:\n")
    click.echo(_format_config(config))


def _format_config(config: QuicknoteConfig) -> str:
    def quote(value: str) -> str:
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'

    def flag(value: bool) -> str:
        return "true" if value else "false"

    token = "********" if config.notion_token else ""
    lines = [
        "[quicknote]",
        f"editor = {quote(config.editor)}",
        f"notes_dir = {quote(str(config.notes_dir))}",
        f"git_enabled = {flag(config.git_enabled)}",
        f"git_repo_path = {quote(str(config.git_repo_path))}",
        f"notion_enabled = {flag(config.notion_enabled)}",
        f"notion_token = {quote(token)}",
        f"notion_database_id = {quote(config.notion_database_id)}",
        f"notion_title_property = {quote(config.notion_title_property)}",
    ]
    return "\n".join(lines)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)
