"""Click command group exposing the bridge on the command line.

Purpose
-------
Let operators inspect the level policy and try conversions without writing
code: ``lib_log_bridge levels`` prints both mapping tables,
``convert-level`` maps a single level and ``convert`` turns command-line
fields into a converted event rendered as JSON.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* :func:`main` - runs the group through :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import threading
import time
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from .adapters import DEFAULT_LEVEL_CONVERTER
from .domain import JulLevel, JulRecord, Log4jLevel
from .lib_log_bridge import convert_level, get_converter, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Convert java.util.logging records and levels into log4j events."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """Print the default level mapping in both directions."""

    console = Console(highlight=False)
    forward_title = "java.util.logging -> log4j"
    forward = Table(title=forward_title, min_width=len(forward_title))
    forward.add_column("Source", style="cyan")
    forward.add_column("Destination", style="green")
    for level in sorted(JulLevel):
        forward.add_row(level.name, DEFAULT_LEVEL_CONVERTER.to_destination(level).name)

    reverse_title = "log4j -> java.util.logging"
    reverse = Table(title=reverse_title, min_width=len(reverse_title))
    reverse.add_column("Destination", style="green")
    reverse.add_column("Source", style="cyan")
    for level in sorted(Log4jLevel):
        reverse.add_row(level.name, DEFAULT_LEVEL_CONVERTER.to_source(level).name)

    console.print(forward)
    console.print(reverse)


@cli.command("convert-level", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("level")
@click.option("--reverse", is_flag=True, help="Treat LEVEL as a log4j level and map it back.")
def cli_convert_level(level: str, reverse: bool) -> None:
    """Print the level LEVEL maps to under the default policy."""

    try:
        mapped = convert_level(level, reverse=reverse)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="LEVEL") from exc
    click.echo(mapped.name)


@cli.command("convert", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--logger", "logger_name", default=None, help="Logger name; omitted means anonymous.")
@click.option("--level", "level_name", default="INFO", show_default=True, help="java.util.logging level name.")
@click.option("--message", default="", help="Raw message text.")
@click.option("--millis", type=int, default=None, help="Epoch milliseconds; defaults to now.")
@click.option("--thread-id", type=int, default=None, help="Numeric thread id; defaults to the current thread.")
@click.option("--class", "source_class_name", default=None, help="Originating class name.")
@click.option("--method", "source_method_name", default=None, help="Originating method name.")
def cli_convert(
    logger_name: str | None,
    level_name: str,
    message: str,
    millis: int | None,
    thread_id: int | None,
    source_class_name: str | None,
    source_method_name: str | None,
) -> None:
    """Build a record from the options and print the converted event as JSON."""

    try:
        level = JulLevel.from_name(level_name)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--level") from exc
    record = JulRecord(
        logger_name=logger_name,
        level=level,
        message=message,
        millis=int(time.time() * 1000) if millis is None else millis,
        thread_id=threading.get_ident() if thread_id is None else thread_id,
        source_class_name=source_class_name,
        source_method_name=source_method_name,
    )
    click.echo(get_converter().convert(record).to_json())


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the CLI with traceback preferences restored afterwards."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
