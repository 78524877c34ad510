"""List command for Quicknote CLI."""

from __future__ import annotations

import click

from ..notes import list_note_files
from ..utils.datetime_fmt import to_user_friendly_local
from ._common import get_app


@click.command(name="ls")
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=10,
    help="Maximum notes to list",
)
@click.pass_context
def ls(ctx: click.Context, limit: int) -> None:
    """List the most recent note files (by modification time)."""

    app = get_app(ctx)
    notes = list_note_files(app.config.notes_dir)

    if not notes:
        click.echo(f"No notes in {app.config.notes_dir}")
        return

    for path in notes[:limit]:
        modified = to_user_friendly_local(path.stat().st_mtime)
        click.echo(f"{modified}  {path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
