"""
Logging utility for the gf CLI.

STDOUT is reserved for command output (pattern names, dumped command
lines, the engine's own matches), so every log record goes to STDERR.
By default only warnings are shown; debug output is enabled with
``--verbose`` or ``GF_DEBUG=true``.
"""

import os
import sys

from loguru import logger as loguru_logger

from gf.constants import DEBUG_ENV_VAR

_LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled through the environment."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() == "true"


def configure_logging(debug: bool = False) -> None:
    """Route log records to stderr at WARNING, or DEBUG when requested.

    Replaces loguru's default handler so repeated calls (one per CLI
    invocation) never stack sinks.
    """
    level = "DEBUG" if debug or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, format=_LOG_FORMAT, colorize=None)


# Export loguru logger for direct use
logger = loguru_logger
