"""
steam-appinfo — CLI entrypoint.

Usage:
    steam-appinfo info 740
    steam-appinfo convert dump.txt
    steamcmd +app_info_print 740 +quit | steam-appinfo convert
"""

from __future__ import annotations

from typing import NoReturn

import click

from . import __version__
from .config import load_settings
from .converter import convert_dump, dumps
from .errors import AppInfoError
from .logging_config import setup_logging
from .steamcmd import app_info


def _emit(node, indent: int, compact: bool) -> None:
    click.echo(dumps(node, indent=None if compact else indent))


def _fail(exc: Exception) -> NoReturn:
    click.secho(f"Error: {exc}", fg="red", err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="steam-appinfo")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write log output to this file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, log_file: str | None) -> None:
    """Fetch Steam app info via steamcmd and print it as JSON."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = settings.log_level
    setup_logging(level=level, log_file=log_file)


@cli.command()
@click.argument("app_id")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0),
              help="Indentation of the printed JSON.")
@click.option("--compact", is_flag=True, help="Print a single line.")
@click.pass_context
def info(ctx: click.Context, app_id: str, indent: int, compact: bool) -> None:
    """Print app info for APP_ID, fetched with steamcmd."""
    try:
        node = app_info(app_id, settings=ctx.obj["settings"])
    except (AppInfoError, ValueError) as exc:
        _fail(exc)
    _emit(node, indent, compact)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8", errors="replace"),
                default="-")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0),
              help="Indentation of the printed JSON.")
@click.option("--compact", is_flag=True, help="Print a single line.")
def convert(source, indent: int, compact: bool) -> None:
    """Convert a saved app info dump (SOURCE, or stdin) to JSON."""
    try:
        node = convert_dump(source.read())
    except AppInfoError as exc:
        _fail(exc)
    _emit(node, indent, compact)


def main() -> None:
    """Console script entry point (``steam-appinfo``)."""
    cli(obj={})


if __name__ == "__main__":
    main()
