"""Integration with Git for publishing note files."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

EchoFunc = Callable[[str], None]


class GitSyncError(RuntimeError):
    """Base error for git publishing issues."""


class GitPublisher:
    """Wrapper around the Git commands that stage, commit and push a note."""

    def __init__(self, repo_path: Path, *, dry_run: bool = False) -> None:
        self.repo_path = repo_path.expanduser()
        self.dry_run = dry_run

    def publish(self, note_path: Path, *, echo: EchoFunc | None = None) -> None:
        """Stage, commit and push ``note_path``.

        The first failing command stops the sequence. Commands that already
        succeeded (for instance a local commit when the push fails) are kept.
        """

        if not self.repo_path.is_dir():
            raise GitSyncError(
                f"Git repository path '{self.repo_path}' does not exist."
            )

        # Absolute so that it resolves from the repository directory.
        staged_path = str(note_path.resolve())
        message = f"Add note: {note_path}"

        for args in (
            ("add", staged_path),
            ("commit", "-m", message),
            ("push",),
        ):
            if self.dry_run:
                if echo is not None:
                    echo(f"Dry-run: would run 'git {' '.join(args)}'")
                continue
            self._run_git(*args)

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    def _run_git(self, *args: str) -> None:
        # Streams are inherited so that credential prompts stay interactive.
        try:
            process = subprocess.run(
                ["git", *args],
                cwd=self.repo_path,
                check=False,
            )
        except OSError as exc:
            raise GitSyncError(f"could not run git: {exc}") from exc
        if process.returncode != 0:
            raise GitSyncError(
                f"git {args[0]} failed (exit {process.returncode})"
            )
