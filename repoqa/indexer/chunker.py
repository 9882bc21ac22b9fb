"""AST-based chunk extraction using tree-sitter.

Source text is sanitized before parsing, but chunk code is always sliced
from the original text. Sanitization only removes characters or swaps a
lone CR for LF, so line numbering is unchanged and a sorted list of
removal points is enough to map offsets back to the original.
"""

import re
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from typing import Any

from repoqa.exceptions import ChunkingError
from repoqa.models import Chunk
from repoqa.utils.logging import logger

from .grammars import LanguageSpec, detect_language, get_language_spec, get_parser

_SHEBANG = re.compile(r"\A#![^\r\n]*")

# CRLF, lone CR, or any surrogate code point (a valid astral character is a
# single code point in Python, so every surrogate here is unpaired)
_UNSAFE = re.compile("\r\n?|[\ud800-\udfff]")


class SanitizedSource:
    """Parser-safe text plus the mapping back to the original offsets."""

    def __init__(self, text: str, removed_at: list[int], removed_total: list[int]):
        self.text = text
        self.data = text.encode("utf-8")
        # removed_at[i]: sanitized offset where a run of removed characters sat
        # removed_total[i]: characters removed up to and including that run
        self._removed_at = removed_at
        self._removed_total = removed_total
        self._ascii = text.isascii()
        self._line_starts: list[int] | None = None
        self._encoded_lines: list[bytes] | None = None

    def to_original(self, offset: int, end: bool = False) -> int:
        """Map a sanitized char offset to the original text.

        A start offset skips removals sitting right before it; an exclusive
        end offset does not absorb removals sitting right after the span.
        """
        if end:
            idx = bisect_left(self._removed_at, offset)
        else:
            idx = bisect_right(self._removed_at, offset)
        return offset + (self._removed_total[idx - 1] if idx else 0)

    def char_offset(self, byte_offset: int, point: Any) -> int:
        """Convert a tree-sitter byte position to a sanitized char offset."""
        if self._ascii:
            return byte_offset

        if self._line_starts is None:
            lines = self.text.split("\n")
            self._encoded_lines = [line.encode("utf-8") for line in lines]
            self._line_starts = []
            position = 0
            for line in lines:
                self._line_starts.append(position)
                position += len(line) + 1

        row, column = point[0], point[1]
        prefix = self._encoded_lines[row][:column]
        return self._line_starts[row] + len(prefix.decode("utf-8", errors="ignore"))


def sanitize_source(source: str, strip_shebang: bool = False) -> SanitizedSource:
    """Prepare source text for the parser without shifting line numbers.

    - blank a leading interpreter directive (its newline is kept)
    - drop unpaired surrogates
    - normalize CRLF and lone CR to LF
    """
    parts: list[str] = []
    removed_at: list[int] = []
    removed_total: list[int] = []
    removed = 0
    out_len = 0
    pos = 0

    def drop(count: int) -> None:
        nonlocal removed
        removed += count
        if removed_at and removed_at[-1] == out_len:
            removed_total[-1] = removed
        else:
            removed_at.append(out_len)
            removed_total.append(removed)

    if strip_shebang:
        match = _SHEBANG.match(source)
        if match:
            drop(match.end())
            pos = match.end()

    for match in _UNSAFE.finditer(source, pos):
        parts.append(source[pos:match.start()])
        out_len += match.start() - pos
        pos = match.end()

        token = match.group()
        if token == "\r\n":
            drop(1)
            parts.append("\n")
            out_len += 1
        elif token == "\r":
            parts.append("\n")
            out_len += 1
        else:
            drop(1)

    parts.append(source[pos:])
    return SanitizedSource("".join(parts), removed_at, removed_total)


def _iter_chunkable(root: Any, kinds: frozenset[str]) -> Iterator[Any]:
    """Yield nodes of the given kinds in pre-order (document order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in kinds:
            yield node
        stack.extend(reversed(node.children))


def _symbol_name(node: Any, spec: LanguageSpec) -> str | None:
    name_node = node.child_by_field_name(spec.name_field)
    if name_node is None:
        return None
    name = name_node.text.decode("utf-8", errors="ignore").strip()
    return name or None


def extract_chunks(language: str, source: str, path: str) -> list[Chunk]:
    """Extract one chunk per chunkable node.

    Args:
        language: Language tag from detect_language()
        source: Original file text
        path: File path recorded on each chunk

    Returns:
        Chunks in pre-order. Empty for unsupported languages and for files
        without chunkable nodes.

    Raises:
        ChunkingError: the grammar failed to produce a tree
    """
    spec = get_language_spec(language)
    parser = get_parser(language) if spec else None
    if parser is None:
        logger.debug(f"No grammar bound for '{language}', skipping {path}")
        return []

    logger.debug(f"Parsing {path} as {language} ({len(source)} chars)")
    sanitized = sanitize_source(source, spec.strip_shebang)

    try:
        tree = parser.parse(sanitized.data)
    except Exception as e:
        raise ChunkingError(f"Tree-sitter failed to parse {path}: {e}", path, language) from e
    if tree is None:
        raise ChunkingError(f"Tree-sitter returned no tree for {path}", path, language)

    root = tree.root_node
    if root.has_error:
        logger.debug(f"Syntax errors in {path}, extracting from partial tree")

    nodes = list(_iter_chunkable(root, spec.chunkable_kinds))
    if not nodes:
        logger.warning(f"No chunkable nodes found in {path}")
        return []

    chunks = []
    for index, node in enumerate(nodes):
        start = sanitized.to_original(sanitized.char_offset(node.start_byte, node.start_point))
        end = sanitized.to_original(
            sanitized.char_offset(node.end_byte, node.end_point), end=True
        )
        code = source[start:end]
        if not code.strip():
            logger.warning(f"Skipped empty chunk {index} from {path}")
            continue

        chunks.append(Chunk(
            id=f"chunk_{index}",
            file=path,
            code=code,
            start_line=node.start_point[0] + 1,
            end_line=node.end_point[0] + 1,
            symbol=_symbol_name(node, spec) or f"anonymous_{index}",
            type=node.type,
            language=language,
        ))

    return chunks


def chunk_file(source: str, path: str) -> list[Chunk] | None:
    """Detect the language of path and extract its chunks.

    Parse failures are logged and never propagate.

    Returns:
        The chunks, or None when the file failed to parse
    """
    language = detect_language(path)
    if language is None:
        return []

    try:
        return extract_chunks(language, source, path)
    except ChunkingError as e:
        logger.error(f"AST chunking failed for {path}: {e}")
        return None
