"""repoqa indexer package.

Walks a source tree, chunks each supported file along its syntax tree
and writes the chunks to a JSONL store:

- core: file filter and lazy directory walker
- grammars: language registry (tree-sitter grammars + chunkable node kinds)
- chunker: sanitize, parse and extract chunks
- writer: append-only chunk store
- runner: the indexing run tying them together
"""

from .chunker import chunk_file, extract_chunks, sanitize_source
from .core import should_skip, should_skip_dir, walk
from .grammars import LANGUAGES, LanguageSpec, detect_language, get_parser
from .runner import run_index
from .writer import ChunkWriter

__all__ = [
    "ChunkWriter",
    "LANGUAGES",
    "LanguageSpec",
    "chunk_file",
    "detect_language",
    "extract_chunks",
    "get_parser",
    "run_index",
    "sanitize_source",
    "should_skip",
    "should_skip_dir",
    "walk",
]
