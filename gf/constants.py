"""Shared constants for gf.

Centralizes the default engine, default search target and the layout of
the per-user pattern directory. None of these are mutated at runtime.
"""

# Search program used when a pattern record does not name one.
DEFAULT_ENGINE: str = "grep"

# Files argument used when none is given on the command line.
DEFAULT_FILES: str = "."

# Extension marking a file in the pattern directory as a pattern record.
PATTERN_SUFFIX: str = ".json"

# Pattern directory candidates, relative to the home directory.
# The config location wins when it exists; the fallback is created lazily.
CONFIG_SUBDIR: str = ".config/gf"
FALLBACK_SUBDIR: str = ".gf"

# Pattern files are non-secret preferences (umask still applies).
PATTERN_FILE_MODE: int = 0o666

# Set to "true" to get debug logging without passing --verbose.
DEBUG_ENV_VAR: str = "GF_DEBUG"
