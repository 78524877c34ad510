"""Creation and discovery of note files on disk."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .utils.datetime_fmt import note_timestamp

NOTE_PREFIX = "note_"
NOTE_SUFFIX = ".md"
DIR_MODE = 0o755


class NoteFileError(RuntimeError):
    """Raised when the notes directory or a note file cannot be created."""


def note_filename(stamp: str, attempt: int = 0) -> str:
    """Return the file name for ``stamp``; ``attempt`` > 0 adds a suffix."""

    if attempt:
        return f"{NOTE_PREFIX}{stamp}_{attempt}{NOTE_SUFFIX}"
    return f"{NOTE_PREFIX}{stamp}{NOTE_SUFFIX}"


def create_note_file(notes_dir: Path, *, now: datetime | None = None) -> Path:
    """Create an empty note file in ``notes_dir`` and return its path.

    The directory (and any missing parents) is created first. The file name
    embeds the local time at second resolution. When a note with that name
    already exists a numeric suffix is appended; existing notes are never
    overwritten.
    """

    try:
        notes_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise NoteFileError(
            f"could not create notes directory {notes_dir}: {exc}"
        ) from exc

    stamp = note_timestamp(now)
    attempt = 0
    while True:
        candidate = notes_dir / note_filename(stamp, attempt)
        try:
            # Exclusive create: fails instead of truncating an existing note.
            with candidate.open("x", encoding="utf-8"):
                pass
        except FileExistsError:
            attempt += 1
            continue
        except OSError as exc:
            raise NoteFileError(f"could not create {candidate}: {exc}") from exc
        return candidate


def list_note_files(notes_dir: Path) -> list[Path]:
    """Return note files in ``notes_dir``, newest first."""

    if not notes_dir.is_dir():
        return []
    notes = [
        path
        for path in notes_dir.glob(f"{NOTE_PREFIX}*{NOTE_SUFFIX}")
        if path.is_file()
    ]
    return sorted(notes, key=lambda p: (p.stat().st_mtime, p.name), reverse=True)
