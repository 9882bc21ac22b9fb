"""Indexer configuration - constants and patterns.

This file contains ONLY configuration constants used by the file filter
and the walker. Per-language grammar settings live in grammars.py.
"""

# =============================================================================
# DIRECTORY FILTER
# =============================================================================

# Directories pruned during the walk. Matched against the final path
# segment exactly, so "latest" is not caught by "test".
SKIP_DIRS: frozenset[str] = frozenset({
    # Version control
    ".git",

    # Dependencies
    "node_modules",

    # Build output
    "dist",

    # Coverage reports
    "coverage",

    # Tests
    "test",
    "__tests__",
})


# =============================================================================
# FILE FILTER
# =============================================================================

# Substrings anywhere in the (forward-slash) path
SKIP_PATH_MARKERS: tuple[str, ...] = (
    "__tests__",
    ".test.",
    ".spec.",
    "/.git/",
    "/node_modules/",
    "/dist/",
    "/coverage/",
)

# Suffixes of the full path: docs, data, lockfiles, snapshots
SKIP_SUFFIXES: tuple[str, ...] = (
    ".md",
    ".json",
    ".lock",
    ".snap",
)

# Suffixes of the lower-cased filename: declaration-only and build config
SKIP_FILENAME_SUFFIXES: tuple[str, ...] = (
    ".d.ts",
    ".config.js",
)
