"""Utilities for launching an editor on a note file."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path


class EditorError(RuntimeError):
    """Raised when the editor cannot be launched or exits unsuccessfully."""


def editor_command(editor: str, path: Path) -> list[str]:
    """Build the argv for ``editor``, with ``path`` as the file argument."""

    try:
        parts = shlex.split(editor)
    except ValueError as exc:
        raise EditorError(f"invalid editor command {editor!r}: {exc}") from exc
    if not parts:
        raise EditorError("no editor configured")
    return [*parts, str(path)]


def open_editor(editor: str, path: Path) -> None:
    """Run ``editor`` on ``path`` in the foreground and wait for it to exit.

    The editor inherits the terminal's standard streams.
    """

    command = editor_command(editor, path)
    try:
        process = subprocess.run(command, check=False)
    except OSError as exc:
        raise EditorError(f"could not launch {command[0]!r}: {exc}") from exc

    if process.returncode != 0:
        raise EditorError(f"{command[0]} exited with status {process.returncode}")
