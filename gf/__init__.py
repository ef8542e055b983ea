"""
gf - a pattern manager for grep-like tools.

Saves named combinations of flags, search pattern(s) and engine
(grep, rg, ag, ...) as small JSON files in the user's home directory,
and replays them later by name:
- Execute the saved search against files or piped input
- Dump the equivalent command line without running it
- List the saved pattern names
"""

__version__ = "1.0.0"
