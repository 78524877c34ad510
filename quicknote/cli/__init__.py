"""Quicknote CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from . import config_cmd, info, ls, new
from ._common import CONTEXT_SETTINGS, QuicknoteCliError

__all__ = ["cli", "main", "QuicknoteCliError"]


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None) -> None:
    """Quicknote: write a timestamped note in your editor.

    Without a subcommand, behaves like 'qn new'.
    """

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path_opt

    if ctx.invoked_subcommand is None:
        ctx.invoke(new.new)


for register_command in (
    new.register,
    config_cmd.register,
    ls.register,
    info.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="qn", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0
