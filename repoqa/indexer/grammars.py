"""Grammar registry and language detection.

Each supported language is a LanguageSpec: a tree-sitter grammar, the
extensions that select it, and the node kinds that become chunks. Adding
a language means adding an entry to LANGUAGES; nothing else branches on
the language tag.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from repoqa.utils.logging import logger


@dataclass(frozen=True)
class LanguageSpec:
    """Capabilities bound to one language tag."""

    name: str
    grammar: str
    extensions: tuple[str, ...]
    chunkable_kinds: frozenset[str]
    # Blank a leading "#!" line before parsing
    strip_shebang: bool = False
    # Field holding the declared identifier
    name_field: str = "name"


_TS_KINDS = frozenset({
    "function_declaration",
    "method_definition",
    "class_declaration",
})

LANGUAGES: dict[str, LanguageSpec] = {
    "go": LanguageSpec(
        name="go",
        grammar="go",
        extensions=(".go",),
        chunkable_kinds=frozenset({"function_declaration", "method_declaration"}),
    ),
    "ts": LanguageSpec(
        name="ts",
        grammar="typescript",
        extensions=(".ts",),
        chunkable_kinds=_TS_KINDS,
        strip_shebang=True,
    ),
    "tsx": LanguageSpec(
        name="tsx",
        grammar="tsx",
        extensions=(".tsx",),
        chunkable_kinds=_TS_KINDS,
        strip_shebang=True,
    ),
    "js": LanguageSpec(
        name="js",
        grammar="javascript",
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
        chunkable_kinds=frozenset({
            "function_declaration",
            "generator_function_declaration",
            "function_expression",
            "arrow_function",
            "method_definition",
            "class_declaration",
        }),
        strip_shebang=True,
    ),
    "py": LanguageSpec(
        name="py",
        grammar="python",
        extensions=(".py",),
        chunkable_kinds=frozenset({"function_definition", "class_definition"}),
    ),
}

_EXTENSION_MAP: dict[str, str] = {
    ext: spec.name for spec in LANGUAGES.values() for ext in spec.extensions
}


def detect_language(path: str) -> str | None:
    """Map a file path to a language tag by exact, case-sensitive extension."""
    for ext, tag in _EXTENSION_MAP.items():
        if str(path).endswith(ext):
            return tag
    return None


def get_language_spec(language: str) -> LanguageSpec | None:
    return LANGUAGES.get(language)


@lru_cache(maxsize=None)
def get_parser(language: str) -> Any | None:
    """Return a cached tree-sitter parser for a language tag.

    Returns None if the tag is unknown or its grammar cannot be loaded;
    the failure is logged once and the language is treated as unsupported.
    """
    spec = LANGUAGES.get(language)
    if spec is None:
        return None

    try:
        from tree_sitter_language_pack import get_parser as load_parser

        return load_parser(spec.grammar)
    except Exception as e:
        logger.warning(
            f"Tree-sitter grammar '{spec.grammar}' not available: {e}. "
            f"Files tagged '{language}' will produce no chunks. "
            "Install language support with: pip install tree-sitter-language-pack"
        )
        return None


def supported_languages() -> list[str]:
    """Language tags whose grammar loads."""
    return sorted(tag for tag in LANGUAGES if get_parser(tag) is not None)
