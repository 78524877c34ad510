"""The note capture workflow: create, edit, then optionally publish."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..app import AppContext
from ..editor import open_editor as default_open_editor
from ..git_sync import GitSyncError
from ..notes import create_note_file
from ..uploader import UploadError, UploadResult

EchoFunc = Callable[[str], None]
EditFunc = Callable[[str, Path], None]


@dataclass(slots=True)
class CaptureResult:
    """What happened during a capture run."""

    note_path: Path
    committed: bool | None = None
    upload: UploadResult | None = None
    upload_failed: bool = False


def _derive_title(content: str, fallback: str) -> str:
    for line in content.splitlines():
        text = line.strip().lstrip("#").strip()
        if text:
            return text
    return fallback


def capture_note(
    ctx: AppContext,
    *,
    edit_fn: EditFunc = default_open_editor,
    echo: EchoFunc,
    warn: EchoFunc,
    now: datetime | None = None,
) -> CaptureResult:
    """Create a note, open it in the editor and publish it.

    ``NoteFileError`` and ``EditorError`` propagate to the caller: nothing is
    published when the note could not be created or edited. Publishing
    failures are reported through ``warn`` and do not stop the run.
    """

    config = ctx.config
    note_path = create_note_file(config.notes_dir, now=now)
    edit_fn(config.editor, note_path)

    result = CaptureResult(note_path=note_path)

    if ctx.git_publisher is not None:
        try:
            ctx.git_publisher.publish(note_path, echo=echo)
        except GitSyncError as exc:
            result.committed = False
            warn(f"Error committing/pushing to git: {exc}")
        else:
            if not ctx.git_publisher.dry_run:
                result.committed = True
                echo("Note committed and pushed to Git.")

    if ctx.uploader is not None:
        _upload(ctx, result, echo=echo, warn=warn)

    return result


def _upload(
    ctx: AppContext, result: CaptureResult, *, echo: EchoFunc, warn: EchoFunc
) -> None:
    # Read back from disk: the editor owns the content until it exits.
    try:
        content = result.note_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        result.upload_failed = True
        warn(f"Error reading note file for Notion upload: {exc}")
        return

    title = _derive_title(content, result.note_path.stem)
    try:
        result.upload = ctx.uploader.upload(content, title=title)
    except UploadError as exc:
        result.upload_failed = True
        warn(f"Error uploading to Notion: {exc}")
        return

    if result.upload.simulated:
        echo("Note upload simulated; nothing was sent to Notion.")
    else:
        echo("Note uploaded to Notion.")
