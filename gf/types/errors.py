"""
Error handling for gf.

Every failure of an invocation is a GfError subclass carrying an internal
error code, a user-facing message and the context it happened in (the
pattern name and/or file path). The CLI is the single error boundary:
it prints ``user_message`` once and exits with ``exit_code``.

A non-zero exit of the search engine is not an error of gf itself; the
dispatcher returns that code and the CLI forwards it.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Environment Errors (1000-1999)
    HOME_DIRECTORY_UNAVAILABLE = 1001

    # Pattern Store Errors (2000-2999)
    DIRECTORY_CREATION_FAILED = 2001
    PATTERN_EXISTS = 2002
    PATTERN_NOT_FOUND = 2003
    PATTERN_WRITE_FAILED = 2004
    PATTERN_READ_FAILED = 2005

    # Pattern Content Errors (3000-3999)
    MALFORMED_PATTERN = 3001
    NO_PATTERN_CONTENT = 3002

    # Execution Errors (4000-4999)
    SPAWN_FAILED = 4001

    # User Input Errors (6000-6999)
    VALIDATION_FAILED = 6001


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    pattern_name: str | None = None
    file_path: str | None = None
    additional_info: dict[str, Any] = field(default_factory=dict)


class GfError(Exception):
    """Base error class for gf."""

    exit_code: int = 1

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.user_message = user_message or message
        self.context = context or ErrorContext()
        self.original_error = original_error

    def get_formatted_message(self) -> str:
        """Get a detailed error message, used for debug output."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.pattern_name:
            parts.append(f"   Pattern: {self.context.pattern_name}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")
        if self.original_error:
            parts.append(f"   Cause: {self.original_error}")

        return "\n".join(parts)


class HomeDirectoryUnavailableError(GfError):
    """The host environment does not expose a home directory."""

    def __init__(self, original_error: Exception | None = None) -> None:
        super().__init__(
            code=ErrorCode.HOME_DIRECTORY_UNAVAILABLE,
            message="Could not determine home directory",
            context=ErrorContext(operation="resolve_directory"),
            original_error=original_error,
        )


class DirectoryCreationError(GfError):
    """The pattern directory could not be created."""

    def __init__(self, path: str, original_error: Exception | None = None) -> None:
        super().__init__(
            code=ErrorCode.DIRECTORY_CREATION_FAILED,
            message=f"Failed to create pattern directory '{path}'",
            context=ErrorContext(operation="create", file_path=path),
            original_error=original_error,
        )


class PatternExistsError(GfError):
    """A pattern file with the requested name already exists."""

    def __init__(
        self, name: str, path: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(
            code=ErrorCode.PATTERN_EXISTS,
            message=f"Failed to create pattern file '{path}': file may already exist",
            context=ErrorContext(operation="create", pattern_name=name, file_path=path),
            original_error=original_error,
        )


class PatternNotFoundError(GfError):
    """No pattern file exists for the requested name."""

    def __init__(
        self, name: str, path: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(
            code=ErrorCode.PATTERN_NOT_FOUND,
            message=f"No such pattern '{name}'",
            context=ErrorContext(operation="read", pattern_name=name, file_path=path),
            original_error=original_error,
        )


class MalformedPatternError(GfError):
    """A pattern file exists but cannot be decoded into a record."""

    def __init__(
        self, name: str, path: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_PATTERN,
            message=f"Pattern file '{path}' is malformed",
            context=ErrorContext(operation="read", pattern_name=name, file_path=path),
            original_error=original_error,
        )


class NoPatternContentError(GfError):
    """A decoded record has neither ``pattern`` nor a non-empty ``patterns``."""

    def __init__(self, path: str, name: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.NO_PATTERN_CONTENT,
            message=f"Pattern file '{path}' contains no pattern(s)",
            context=ErrorContext(operation="resolve", pattern_name=name, file_path=path),
        )


class SpawnFailureError(GfError):
    """The search engine could not be launched."""

    def __init__(self, engine: str, original_error: Exception | None = None) -> None:
        super().__init__(
            code=ErrorCode.SPAWN_FAILED,
            message="Failed to execute command",
            user_message=f"Failed to execute command '{engine}'",
            context=ErrorContext(
                operation="execute", additional_info={"engine": engine}
            ),
            original_error=original_error,
        )


class PatternValidationError(GfError):
    """Invalid input for a save request (empty name, empty pattern, ...)."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message=message,
            context=ErrorContext(operation="save", pattern_name=name),
        )


class PatternStoreError(GfError):
    """Any other I/O failure of the pattern store."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PATTERN_READ_FAILED,
        path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=ErrorContext(file_path=path),
            original_error=original_error,
        )
