"""File filtering and directory traversal.

The filters are pure string checks so that known-irrelevant files are
rejected before any I/O, and whole subtrees are pruned at the directory
level instead of filtering every descendant.
"""

import os
from collections.abc import Iterator

from repoqa.exceptions import DirectoryReadError
from repoqa.utils.logging import logger

from .config import SKIP_DIRS, SKIP_FILENAME_SUFFIXES, SKIP_PATH_MARKERS, SKIP_SUFFIXES


def _normalize(path: str) -> str:
    return str(path).replace("\\", "/")


def should_skip(path: str) -> bool:
    """Check whether a file path is excluded from indexing.

    Args:
        path: File path as produced by the walker

    Returns:
        True for tests, VCS/dependency/build/coverage content, docs, data,
        lockfiles, snapshots, type declarations and build configs
    """
    path = _normalize(path)
    if any(marker in path for marker in SKIP_PATH_MARKERS):
        return True
    if path.endswith(SKIP_SUFFIXES):
        return True

    filename = path.rsplit("/", 1)[-1].lower()
    return filename.endswith(SKIP_FILENAME_SUFFIXES)


def should_skip_dir(path: str) -> bool:
    """Check whether a directory's final path segment is in SKIP_DIRS."""
    name = _normalize(path).rstrip("/").rsplit("/", 1)[-1]
    return name in SKIP_DIRS


def walk(root: str) -> Iterator[str]:
    """Lazily yield every regular file under root, depth first.

    Entries are visited in listing order. Skipped directories are pruned,
    symlinks are neither followed nor yielded. Each directory handle is
    scoped to a ``with`` block, so closing the generator early releases
    every handle still open along the current path.

    Raises:
        DirectoryReadError: a directory could not be opened or listed
    """
    try:
        handle = os.scandir(root)
    except OSError as e:
        raise DirectoryReadError(str(root), e) from e

    with handle as entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                raise DirectoryReadError(str(root), e) from e

            entry_path = _normalize(os.path.join(root, entry.name))
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                logger.warning(f"Cannot stat {entry_path}, skipping")
                continue

            if is_dir:
                if should_skip_dir(entry_path):
                    logger.debug(f"Skipping directory: {entry_path}")
                    continue
                yield from walk(entry_path)
            elif is_file:
                yield entry_path
