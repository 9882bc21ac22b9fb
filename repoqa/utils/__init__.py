"""repoqa utilities package."""

from .constants import (
    CHAT_MODEL,
    CHUNK_STORE,
    DATA_DIR,
    DEFAULT_TOP_K,
    ERROR_LOG_FILE,
    MAX_FILE_SIZE,
    RANKER_CMD,
    RANKER_TIMEOUT,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "CHAT_MODEL",
    "CHUNK_STORE",
    "DATA_DIR",
    "DEFAULT_TOP_K",
    "ERROR_LOG_FILE",
    "MAX_FILE_SIZE",
    "RANKER_CMD",
    "RANKER_TIMEOUT",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
