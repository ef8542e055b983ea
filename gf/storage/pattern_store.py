"""Pattern store for saved search patterns.

Pattern records are stored as one pretty-printed JSON file per pattern,
``<name>.json``, in the user's pattern directory. The directory is
``~/.config/gf`` when it exists, ``~/.gf`` otherwise (created on first
save). Records are created once and never overwritten: creation uses an
exclusive open, so of two concurrent saves under one name exactly one
succeeds.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from gf.constants import (
    CONFIG_SUBDIR,
    FALLBACK_SUBDIR,
    PATTERN_FILE_MODE,
    PATTERN_SUFFIX,
)
from gf.types.core import PatternRecord
from gf.types.errors import (
    DirectoryCreationError,
    ErrorCode,
    HomeDirectoryUnavailableError,
    MalformedPatternError,
    PatternExistsError,
    PatternNotFoundError,
    PatternStoreError,
    PatternValidationError,
)
from gf.utils.helpers import strip_suffix
from gf.utils.logger import logger


def resolve_pattern_dir(home: Path | None = None) -> Path:
    """Locate the pattern directory under the user's home directory.

    Args:
        home: Home directory to use instead of the environment's.

    Returns:
        ``<home>/.config/gf`` if it exists, else ``<home>/.gf`` (which may
        not exist yet).

    Raises:
        HomeDirectoryUnavailableError: If no home directory can be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise HomeDirectoryUnavailableError(original_error=e) from e

    config_dir = home / CONFIG_SUBDIR
    if config_dir.exists():
        return config_dir
    return home / FALLBACK_SUBDIR


def normalize_name(name: str) -> str:
    """Strip a trailing ``.json`` so ``aws-keys.json`` and ``aws-keys`` match."""
    return strip_suffix(name, PATTERN_SUFFIX)


def validate_name(name: str | None) -> str:
    """Validate a pattern name for saving.

    Returns:
        Normalized name (without ``.json``).

    Raises:
        PatternValidationError: If the name is empty or is not a plain file name.
    """
    if not name:
        raise PatternValidationError("Name cannot be empty")

    clean = normalize_name(name)
    if not clean:
        raise PatternValidationError("Name cannot be empty", name=name)

    if clean in (".", "..") or "/" in clean or (os.sep != "/" and os.sep in clean):
        raise PatternValidationError(f"Invalid pattern name '{name}'", name=name)

    return clean


class PatternStore:
    """Create, list and read pattern records in the pattern directory.

    Usage:
        store = PatternStore()
        store.create_pattern("php-sinks", PatternRecord(flags="-HnrE", pattern="eval\\("))
        names = store.list_patterns()
        record = store.read_pattern("php-sinks")
    """

    def __init__(self, pattern_dir: Path | str | None = None):
        """Initialize the pattern store.

        Args:
            pattern_dir: Directory holding the pattern files. Resolved from
                the home directory when omitted.
        """
        self._pattern_dir = (
            Path(pattern_dir) if pattern_dir is not None else resolve_pattern_dir()
        )
        logger.debug(f"Pattern directory: {self._pattern_dir}")

    @property
    def pattern_dir(self) -> Path:
        """Get the pattern directory path."""
        return self._pattern_dir

    def path_for(self, name: str) -> Path:
        """Get the file path of a pattern, ``<pattern_dir>/<name>.json``."""
        return self._pattern_dir / f"{normalize_name(name)}{PATTERN_SUFFIX}"

    def _ensure_dir(self) -> None:
        """Create the pattern directory (and parents) if it doesn't exist."""
        try:
            self._pattern_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(str(self._pattern_dir), original_error=e) from e

    def list_patterns(self) -> list[str]:
        """List saved pattern names.

        Returns:
            Names (without ``.json``) sorted alphabetically, or an empty list
            when the pattern directory doesn't exist.
        """
        if not self._pattern_dir.exists():
            return []

        try:
            names = [
                path.stem
                for path in self._pattern_dir.iterdir()
                if path.suffix == PATTERN_SUFFIX and path.is_file()
            ]
        except OSError as e:
            raise PatternStoreError(
                f"Failed to read pattern directory '{self._pattern_dir}'",
                path=str(self._pattern_dir),
                original_error=e,
            ) from e

        return sorted(names)

    def create_pattern(self, name: str, record: PatternRecord) -> Path:
        """Save a new pattern record. Existing files are never overwritten.

        Args:
            name: Pattern name (``.json`` appended automatically).
            record: Record to serialize.

        Returns:
            Path of the created file.

        Raises:
            PatternValidationError: If the name is invalid or the record cannot
                be encoded as UTF-8.
            DirectoryCreationError: If the pattern directory cannot be created.
            PatternExistsError: If a pattern with this name already exists.
        """
        clean_name = validate_name(name)

        try:
            payload = (
                json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"
            ).encode("utf-8")
        except UnicodeEncodeError as e:
            # Undecodable argv bytes arrive as lone surrogates
            raise PatternValidationError(
                "Pattern contains characters that cannot be saved as UTF-8",
                name=clean_name,
            ) from e

        self._ensure_dir()
        path = self.path_for(clean_name)

        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, PATTERN_FILE_MODE)
        except OSError as e:
            raise PatternExistsError(clean_name, str(path), original_error=e) from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
        except (OSError, ValueError) as e:
            # Never leave a half-written record behind
            path.unlink(missing_ok=True)
            raise PatternStoreError(
                f"Failed to write pattern file '{path}'",
                code=ErrorCode.PATTERN_WRITE_FAILED,
                path=str(path),
                original_error=e,
            ) from e

        logger.debug(f"Pattern saved: {clean_name} -> {path}")
        return path

    def read_pattern(self, name: str) -> PatternRecord:
        """Read a pattern record.

        Raises:
            PatternNotFoundError: If no file exists for the name.
            MalformedPatternError: If the file cannot be decoded into a record.
        """
        path = self.path_for(name)

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            # Unreadable counts as missing, e.g. a directory named <name>.json
            raise PatternNotFoundError(name, str(path), original_error=e) from e
        except UnicodeDecodeError as e:
            raise MalformedPatternError(name, str(path), original_error=e) from e

        try:
            record = PatternRecord.from_dict(json.loads(text))
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting overflows the decoder
            raise MalformedPatternError(name, str(path), original_error=e) from e

        logger.debug(f"Pattern loaded: {name} <- {path}")
        return record
