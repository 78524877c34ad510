"""Shared helpers for Quicknote CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class QuicknoteCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""

    def show(self, file: IO[Any] | None = None) -> None:
        # Messages already carry their own "Error ..." prefix.
        click.echo(self.format_message(), file=file, err=True)


def warn(message: str) -> None:
    """Report a recoverable problem on stderr."""

    click.echo(message, err=True)


def get_app(ctx: click.Context, *, dry_run: bool = False) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt, echo=click.echo, dry_run=dry_run)
    except MissingConfigError as exc:
        raise QuicknoteCliError(
            f"{exc}. Run 'qn config' once to create it."
        ) from exc
    except ConfigError as exc:
        raise QuicknoteCliError(f"Error loading configuration: {exc}") from exc

    ctx.obj["app"] = app
    return app
