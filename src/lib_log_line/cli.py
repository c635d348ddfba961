"""Click command group exposing package metadata and a rendering demo.

Purpose
-------
Provide ``lib_log_line`` / ``python -m lib_log_line`` so packaging checks
can execute the library and so users can preview styles, prefixes and
destinations without writing code.

Contents
--------
* :func:`cli` - root group with ``--version`` and ``--use-dotenv``.
* ``info`` - print the metadata banner.
* ``demo`` - emit sample lines through a :class:`LogManager`.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .domain.levels import LogLevel, to_rank
from .domain.options import DestinationConfig, ShowOptions, TIME_PREFIX_CHOICES
from .manager import LogManager

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVEL_CHOICES = [level.severity for level in LogLevel if level is not LogLevel.SKIP]


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Leveled, styled line logger."""

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("demo", context_settings=CONTEXT_SETTINGS)
@click.option("--level", type=click.Choice(_LEVEL_CHOICES), default="trace", show_default=True, help="Threshold.")
@click.option("--level-prefix/--no-level-prefix", default=True, show_default=True, help="Show [LEVEL] column.")
@click.option(
    "--time-prefix",
    type=click.Choice([*TIME_PREFIX_CHOICES, "none"]),
    default="elapsed",
    show_default=True,
    help="Time column shown before the level.",
)
@click.option("--color/--no-color", default=True, show_default=True, help="Colourise styled fragments.")
@click.option(
    "--file",
    "log_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also append plain lines to this file.",
)
def cli_demo(*, level: str, level_prefix: bool, time_prefix: str, color: bool, log_file: Path | None) -> None:
    """Emit one line per level and per built-in style."""

    destinations: list[DestinationConfig] = [DestinationConfig(name="console", stylize=color)]
    if log_file is not None:
        destinations.append(DestinationConfig(name="file", filename=log_file))
    manager = LogManager(
        destinations,
        level=to_rank(level),
        show=ShowOptions(
            timestamp=False if time_prefix == "none" else time_prefix,  # type: ignore[arg-type]
            level=level_prefix,
            req_id=True,
            emitter=True,
        ),
        colorize=color,
    )
    manager.start()
    log = manager.get_logger("demo", req_id="001")
    log.trace("Trace").value("details").emit()
    log.debug("Debug").label("key:").value(42).emit()
    log.verbose("Verbose").path(str(Path.cwd())).emit()
    log.info().h1("Heading").emit()
    log.info().tab(1).h2("Subheading").emit("with plain text")
    log.info().tab(2).h3("Section").comment("suffix").emit()
    log.info().label("Labelled").highlight("highlight").date(datetime.now()).emit()
    log.info().stylize("action", "action style").strikethru("strikethru").emit()
    log.info("Payload").data({"items": [1, 2], "ok": True}).emit()
    log.warn().warn("Warning text").emit()
    log.error().error("Error text").ewt("with elapsed time")
    manager.log_message(LogLevel.INFO, "Demo finished", emitter="demo", action="done")
    manager.stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
