"""CLI entry point for femto. Uses Click for argument parsing."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from femto.app import open_session, run
from femto.config import LOG_LEVELS, Config
from femto.errors import FemtoError
from femto.log import setup_logging
from femto.terminal import ProcessTerminal

USAGE = "[Usage]: femto <input_file>"


def _fail(message: str) -> NoReturn:
    click.echo(f"[Error]: {message}", err=True)
    sys.exit(1)


@click.command()
@click.argument("path", required=False)
@click.option("--log-file", default=None, help="Append debug logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS),
    default=None,
    help="Log level for --log-file",
)
def main(path, log_file, log_level):
    """Edit PATH in a minimal modal terminal editor.

    Navigation mode: w/a/s/d move, e edit, f save, q quit.
    Edit mode: type to insert, Enter splits, Backspace deletes, Esc leaves.
    """
    if not path:
        click.echo(USAGE, err=True)
        _fail("File path is not provided.")

    config = Config.from_env()
    if log_file:
        config.log_file = log_file
    if log_level:
        config.log_level = log_level
    try:
        setup_logging(config)
    except OSError as e:
        _fail(f"Could not open the log file '{config.log_file}': {e.strerror or e}")

    terminal = ProcessTerminal(write_log=config.write_log)
    try:
        session = open_session(path, terminal)
    except FemtoError as e:
        _fail(str(e))

    run(session, terminal, config)
