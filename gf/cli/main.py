"""
gf command-line interface.

    gf --list
    gf --save <name> [--engine <engine>] [<flags>] <pattern>
    gf [--dump] <name> [<files>]

Flags meant for the engine (``-Hnri``, ``--color=always``...) are passed
through as ordinary arguments; anything after ``--`` is never parsed as a
gf option.
"""

from __future__ import annotations

import click

from gf import __version__
from gf.constants import DEFAULT_FILES
from gf.patterns.resolver import resolve
from gf.search.dispatcher import dispatch
from gf.storage.pattern_store import PatternStore
from gf.types.core import PatternRecord
from gf.types.errors import GfError, PatternValidationError
from gf.utils.logger import configure_logging, logger

CONTEXT_SETTINGS = {
    # Engine flags such as -Hnri are positional values, not gf options
    "ignore_unknown_options": True,
    "help_option_names": ["--help"],
}


def list_patterns() -> int:
    """Print each saved pattern name on its own line."""
    for name in PatternStore().list_patterns():
        click.echo(name)
    return 0


def save_pattern(
    name: str | None,
    args: tuple[str, ...],
    engine: str | None,
) -> int:
    """Save ``args`` (flags, then pattern) under ``name``."""
    if not name:
        raise PatternValidationError("Name cannot be empty")

    flags = args[0] if args else ""
    pattern = args[1] if len(args) > 1 else ""
    if not pattern:
        raise PatternValidationError("Pattern cannot be empty", name=name)
    if len(args) > 2:
        logger.warning(f"Ignoring extra arguments: {' '.join(args[2:])}")

    record = PatternRecord(
        flags=flags or None,
        pattern=pattern,
        engine=engine,
    )
    PatternStore().create_pattern(name, record)
    return 0


def use_pattern(
    name: str | None,
    args: tuple[str, ...],
    dump_only: bool,
    engine: str | None,
) -> int:
    """Resolve the pattern ``name`` and dump or execute it."""
    if not name:
        raise PatternValidationError("Pattern name is required")

    if engine is not None:
        logger.warning("--engine only applies to --save; using the engine saved with the pattern")

    files = args[0] if args else DEFAULT_FILES
    if len(args) > 1:
        logger.warning(f"Ignoring extra arguments: {' '.join(args[1:])}")

    store = PatternStore()
    record = store.read_pattern(name)
    command = resolve(record, str(store.path_for(name)), name=name)
    return dispatch(command, files, dump_only=dump_only)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--save",
    is_flag=True,
    help="Save a pattern (e.g., gf --save pat-name -Hnri 'search-pattern')",
)
@click.option("--list", "list_", is_flag=True, help="List available patterns")
@click.option("--dump", is_flag=True, help="Print the command rather than executing it")
@click.option(
    "--engine",
    default=None,
    metavar="ENGINE",
    help="Specify the engine to use when saving (e.g., 'grep', 'rg', 'ag')",
)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.version_option(version=__version__, prog_name="gf", message="%(prog)s v%(version)s")
@click.argument("name", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    save: bool,
    list_: bool,
    dump: bool,
    engine: str | None,
    verbose: bool,
    name: str | None,
    args: tuple[str, ...],
) -> None:
    """Pattern manager for grep-like tools.

    Save a named combination of flags, pattern and engine, then run it
    again by NAME against FILES (default: current directory) or piped input.
    """
    configure_logging(debug=verbose)

    try:
        if list_:
            code = list_patterns()
        elif save:
            code = save_pattern(name, args, engine)
        else:
            code = use_pattern(name, args, dump, engine)
    except GfError as e:
        logger.debug(e.get_formatted_message())
        click.echo(f"{click.style('Error:', fg='bright_red', bold=True)} {e.user_message}", err=True)
        ctx.exit(e.exit_code)
    else:
        ctx.exit(code)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="gf")
