"""Application bootstrap and context container for Quicknote."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from .config import QuicknoteConfig, load_config
from .git_sync import GitPublisher
from .uploader import NoteUploader, build_uploader


@dataclass(slots=True)
class AppContext:
    """Aggregates the configuration and the optional publishing services."""

    config: QuicknoteConfig
    git_publisher: GitPublisher | None
    uploader: NoteUploader | None


def bootstrap(
    config_path: Path | None,
    *,
    echo: Callable[[str], None],
    dry_run: bool = False,
    environ: Mapping[str, str] | None = None,
) -> AppContext:
    """Load configuration and build the services it enables."""

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path, environ)

    git_publisher = (
        GitPublisher(config.git_repo_path, dry_run=dry_run)
        if config.git_enabled
        else None
    )
    uploader = (
        build_uploader(config, echo=echo, dry_run=dry_run)
        if config.notion_enabled
        else None
    )
    return AppContext(config=config, git_publisher=git_publisher, uploader=uploader)
