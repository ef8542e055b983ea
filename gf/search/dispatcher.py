"""Command dispatch: print a resolved invocation, or run it.

Dump mode renders ``<engine> [<flags> ]"<pattern>" <files>`` and spawns
nothing. Execute mode runs the engine with gf's own stdin, stdout and
stderr, and reports the engine's exit status back as gf's exit code.

When stdin is a pipe the files argument is left out, so the engine reads
the piped data (``cmd < data`` rather than ``cmd file``).
"""

from __future__ import annotations

import os
import subprocess

import click

from gf.constants import DEFAULT_FILES
from gf.types.core import SearchCommand
from gf.types.errors import SpawnFailureError
from gf.utils.logger import logger


def stdin_is_pipe() -> bool:
    """True when standard input is not a terminal (pipe, file or /dev/null)."""
    return not os.isatty(0)


def child_exit_code(returncode: int | None) -> int:
    """Map a child's return code to gf's exit code.

    Zero stays zero; a missing code or termination by a signal (negative
    code) becomes 1; any other code is forwarded unchanged.
    """
    if returncode is None or returncode < 0:
        return 1
    return returncode


def dump(command: SearchCommand, files: str = DEFAULT_FILES) -> str:
    """Command line equivalent to running ``command`` against ``files``."""
    return command.render(files)


def execute(
    command: SearchCommand,
    files: str = DEFAULT_FILES,
    piped: bool | None = None,
) -> int:
    """Run the engine and wait for it to finish.

    Args:
        command: Resolved invocation.
        files: Files argument, dropped when stdin is piped.
        piped: Whether stdin is a pipe; detected when omitted.

    Returns:
        Exit code gf should exit with.

    Raises:
        SpawnFailureError: If the engine cannot be launched.
    """
    if piped is None:
        piped = stdin_is_pipe()

    argv = command.argv(files, include_files=not piped)
    logger.debug(f"Executing: {argv} (stdin piped: {piped})")

    try:
        completed = subprocess.run(argv, check=False)
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte in an argument
        raise SpawnFailureError(command.engine, original_error=e) from e

    logger.debug(f"{command.engine} exited with {completed.returncode}")
    return child_exit_code(completed.returncode)


def dispatch(
    command: SearchCommand,
    files: str = DEFAULT_FILES,
    dump_only: bool = False,
    piped: bool | None = None,
) -> int:
    """Dump or execute ``command``; returns the exit code for gf."""
    if dump_only:
        click.echo(dump(command, files))
        return 0
    return execute(command, files, piped=piped)
