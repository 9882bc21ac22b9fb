"""Indexer workflow runner."""

import time
from pathlib import Path
from typing import Any

from repoqa.utils.constants import CHUNK_STORE, MAX_FILE_SIZE
from repoqa.utils.logging import logger

from .chunker import chunk_file
from .core import should_skip, walk
from .grammars import detect_language
from .writer import ChunkWriter


def read_source(path: str, max_size: int = MAX_FILE_SIZE) -> str | None:
    """Read a file as UTF-8 without newline translation.

    Returns None for files at or above max_size.

    Raises:
        OSError: the file cannot be read
        UnicodeDecodeError: the file is not UTF-8 text
    """
    file_path = Path(path)
    if file_path.stat().st_size >= max_size:
        return None
    return file_path.read_bytes().decode("utf-8")


def run_index(
    root_path: str,
    output: Path | str = CHUNK_STORE,
    max_file_size: int = MAX_FILE_SIZE,
) -> dict[str, Any]:
    """Walk root_path and write every extracted chunk to the chunk store.

    The store is truncated first and closed on every exit path. Per-file
    failures are logged and counted; a directory that cannot be read
    aborts the run with DirectoryReadError.

    Returns:
        Run statistics
    """
    start_time = time.time()
    if not Path(root_path).exists():
        raise FileNotFoundError(f"Root path does not exist: {root_path}")

    stats = {
        "files_seen": 0,
        "files_skipped": 0,
        "files_indexed": 0,
        "files_failed": 0,
        "chunks_written": 0,
    }

    logger.info(f"Indexing: {root_path}")

    with ChunkWriter(output) as writer:
        for path in walk(root_path):
            stats["files_seen"] += 1

            if should_skip(path):
                logger.debug(f"Skipping: {path}")
                stats["files_skipped"] += 1
                continue

            if detect_language(path) is None:
                logger.debug(f"Skipping {path}: no language for this extension")
                stats["files_skipped"] += 1
                continue

            try:
                source = read_source(path, max_file_size)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error processing {path}: {e}")
                stats["files_failed"] += 1
                continue

            if source is None:
                logger.warning(f"Skipping {path}: file exceeds {max_file_size} bytes")
                stats["files_skipped"] += 1
                continue

            chunks = chunk_file(source, path)
            if chunks is None:
                stats["files_failed"] += 1
                continue

            for chunk in chunks:
                logger.debug(
                    f"[indexing] {chunk.file} - {chunk.id} - {len(chunk.code.strip())} chars"
                )
                writer.write(chunk)

            stats["files_indexed"] += 1

        stats["chunks_written"] = writer.count

    stats["elapsed"] = time.time() - start_time
    logger.info(
        f"Indexed {stats['files_indexed']} files, wrote {stats['chunks_written']} chunks "
        f"to {output}"
    )
    return stats
