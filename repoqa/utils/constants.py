"""Centralized constants for repoqa.

Single source of truth for output paths and the environment-driven
settings used by the indexer, the ranking client and the ask command.
"""

import os
import shlex
from pathlib import Path


def _get_int(env_var: str, default: int) -> int:
    """Read a positive integer from the environment or use default."""
    try:
        value = int(os.environ.get(env_var, default))
    except (ValueError, TypeError):
        return default
    return value if value > 0 else default


# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_DATA_DIR = "REPOQA_DATA_DIR"
ENV_RANKER = "REPOQA_RANKER"
ENV_RANKER_TIMEOUT = "REPOQA_RANKER_TIMEOUT"
ENV_CHAT_MODEL = "REPOQA_CHAT_MODEL"
ENV_MAX_FILE_SIZE = "REPOQA_MAX_FILE_SIZE"
ENV_TOP_K = "REPOQA_TOP_K"

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

DATA_DIR = Path(os.environ.get(ENV_DATA_DIR, "data"))

# Chunk store read by the ranking executable
CHUNK_STORE = DATA_DIR / "chunked.jsonl"

ERROR_LOG_FILE = DATA_DIR / "error.log"

# ============================================================================
# FILE PROCESSING LIMITS
# ============================================================================

# Files at or above this size are not parsed (default: 2MB)
MAX_FILE_SIZE = _get_int(ENV_MAX_FILE_SIZE, 2 * 1024 * 1024)

# ============================================================================
# RETRIEVAL / ANSWERING
# ============================================================================

RANKER_CMD: list[str] = shlex.split(os.environ.get(ENV_RANKER, "./repoqa"))
RANKER_TIMEOUT = _get_int(ENV_RANKER_TIMEOUT, 60)
DEFAULT_TOP_K = _get_int(ENV_TOP_K, 3)
CHAT_MODEL = os.environ.get(ENV_CHAT_MODEL, "gpt-4")
