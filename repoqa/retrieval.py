"""Client for the external ranking executable.

The ranker is a black box: it is invoked as

    <ranker> query --json --top <k> <query>

and must print a single JSON array of scored chunks on stdout. Anything
else is reported as a RetrievalError.
"""

import json
import subprocess

from repoqa.exceptions import RetrievalError
from repoqa.models import ScoredChunk
from repoqa.utils.constants import RANKER_CMD, RANKER_TIMEOUT
from repoqa.utils.logging import get_subprocess_env, logger


def get_top_k_chunks(
    query: str,
    top_k: int,
    ranker: list[str] | None = None,
    timeout: int = RANKER_TIMEOUT,
) -> list[ScoredChunk]:
    """Ask the ranking executable for the top_k chunks matching query."""
    command = [*(ranker or RANKER_CMD), "query", "--json", "--top", str(top_k), query]
    logger.debug(f"Running ranker: {command}")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=get_subprocess_env(),
        )
    except FileNotFoundError as e:
        raise RetrievalError(f"Failed to get relevant chunks: ranker not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise RetrievalError(f"Failed to get relevant chunks: ranker timed out after {timeout}s") from e
    except OSError as e:
        raise RetrievalError(f"Failed to get relevant chunks: {e}") from e

    if result.returncode != 0:
        error_msg = f"ranker exited with code {result.returncode}"
        if result.stderr:
            error_msg += f": {result.stderr.strip()[:500]}"
        raise RetrievalError(f"Failed to get relevant chunks: {error_msg}")

    try:
        payload = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise RetrievalError(f"Failed to get relevant chunks: output is not JSON: {e}") from e

    if not isinstance(payload, list):
        raise RetrievalError(
            "Failed to get relevant chunks: expected an array of scored chunks, "
            f"got {type(payload).__name__}"
        )

    chunks = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise RetrievalError(
                f"Failed to get relevant chunks: result {position} is not an object"
            )
        try:
            chunks.append(ScoredChunk.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise RetrievalError(
                f"Failed to get relevant chunks: result {position} is malformed: {e}"
            ) from e

    logger.info(f"Found {len(chunks)} relevant chunks")
    return chunks
