"""Centralized logging configuration using Loguru.

Usage:
    from repoqa.utils.logging import logger
    logger.info("Message")
    logger.debug("Per-chunk detail")  # Only shows if REPOQA_LOG_LEVEL=DEBUG

Environment Variables:
    REPOQA_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    REPOQA_LOG_JSON: 0|1 (default: 0, human-readable)
    REPOQA_LOG_FILE: path to an NDJSON log file (optional)
    REPOQA_REQUEST_ID: correlation ID shared with the ranking subprocess
"""

import json
import os
import sys
import uuid

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("REPOQA_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("REPOQA_LOG_JSON", "0") == "1"
_log_file = os.environ.get("REPOQA_LOG_FILE")
_request_id = os.environ.get("REPOQA_REQUEST_ID") or str(uuid.uuid4())


def _to_ndjson(message) -> str:
    """Render a loguru message as a single JSON line."""
    record = message.record
    entry = {
        "level": record["level"].name,
        "time": record["time"].isoformat(),
        "msg": record["message"],
        "pid": record["process"].id,
        "request_id": record["extra"].get("request_id", _request_id),
    }
    for key, value in record["extra"].items():
        if key != "request_id":
            entry[key] = value
    if record["exception"]:
        exc = record["exception"]
        entry["err"] = {
            "type": exc.type.__name__ if exc.type else "Error",
            "message": str(exc.value) if exc.value else "",
        }
    return json.dumps(entry, default=str) + "\n"


def ndjson_sink(message):
    """Write log records to stderr as NDJSON.

    stdout is reserved for command output (answers, --json results).
    """
    # Never call logger.* inside a sink - causes infinite recursion
    sys.stderr.write(_to_ndjson(message))
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(ndjson_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # colors only on a TTY
    )

if _log_file:

    def _file_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_ndjson(message))

    logger.add(_file_sink, level="DEBUG")


def get_subprocess_env() -> dict:
    """Get environment dict with REPOQA_REQUEST_ID for subprocess calls."""
    env = os.environ.copy()
    env["REPOQA_REQUEST_ID"] = _request_id
    return env


__all__ = [
    "logger",
    "get_subprocess_env",
]
