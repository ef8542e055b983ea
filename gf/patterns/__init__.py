"""Resolution of pattern records into engine invocations."""

from .resolver import resolve, resolve_engine, resolve_pattern

__all__ = ["resolve", "resolve_engine", "resolve_pattern"]
