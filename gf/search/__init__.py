"""Dumping and executing resolved search commands."""

from .dispatcher import child_exit_code, dispatch, dump, execute, stdin_is_pipe

__all__ = ["child_exit_code", "dispatch", "dump", "execute", "stdin_is_pipe"]
