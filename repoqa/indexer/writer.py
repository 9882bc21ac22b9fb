"""Chunk store writer - one JSON record per line."""

import json
from pathlib import Path
from typing import TextIO

from repoqa.models import Chunk
from repoqa.utils.logging import logger


class ChunkWriter:
    """Append-only JSONL writer for one indexing run.

    Opening truncates any previous store. Use as a context manager so the
    stream is closed on every exit path:

        with ChunkWriter(CHUNK_STORE) as writer:
            writer.write(chunk)
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.count = 0
        self._stream: TextIO | None = None

    def open(self) -> "ChunkWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = open(self.path, "w", encoding="utf-8", newline="\n")
        self.count = 0
        return self

    def write(self, chunk: Chunk) -> None:
        """Serialize one chunk as a single line."""
        if self._stream is None:
            raise ValueError(f"Chunk store {self.path} is not open")
        self._stream.write(json.dumps(chunk.to_dict()) + "\n")
        self.count += 1

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.debug(f"Closed chunk store {self.path} ({self.count} records)")

    @property
    def closed(self) -> bool:
        return self._stream is None

    def __enter__(self) -> "ChunkWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
