"""New-note command for Quicknote CLI."""

from __future__ import annotations

import click

from ..editor import EditorError, open_editor
from ..notes import NoteFileError
from ..services.capture import capture_note
from ._common import QuicknoteCliError, get_app, warn


@click.command(name="new")
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Show git commands and simulate the upload instead of running them.",
)
@click.pass_context
def new(ctx: click.Context, dry_run: bool) -> None:
    """Create a note, edit it, then commit and upload it when enabled."""

    app = get_app(ctx, dry_run=dry_run)

    try:
        capture_note(app, edit_fn=open_editor, echo=click.echo, warn=warn)
    except NoteFileError as exc:
        raise QuicknoteCliError(f"Error creating new note file: {exc}") from exc
    except EditorError as exc:
        raise QuicknoteCliError(f"Error opening editor: {exc}") from exc

    click.echo("Done!")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(new)
