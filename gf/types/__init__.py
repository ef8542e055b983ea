"""
gf type definitions.

This module exports the pattern record types and the error hierarchy.
"""

# Core types
from .core import PatternContent, PatternKind, PatternRecord, SearchCommand

# Error types
from .errors import (
    DirectoryCreationError,
    ErrorCode,
    ErrorContext,
    GfError,
    HomeDirectoryUnavailableError,
    MalformedPatternError,
    NoPatternContentError,
    PatternExistsError,
    PatternNotFoundError,
    PatternStoreError,
    PatternValidationError,
    SpawnFailureError,
)

__all__ = [
    # Core types
    "PatternKind",
    "PatternContent",
    "PatternRecord",
    "SearchCommand",
    # Error types
    "ErrorCode",
    "ErrorContext",
    "GfError",
    "HomeDirectoryUnavailableError",
    "DirectoryCreationError",
    "PatternExistsError",
    "PatternNotFoundError",
    "MalformedPatternError",
    "NoPatternContentError",
    "SpawnFailureError",
    "PatternValidationError",
    "PatternStoreError",
]
