"""Custom exceptions for repoqa.

Per-file failures (ChunkingError) are recovered and counted by the indexing
run. Everything else is fatal to the command that raised it.
"""


class RepoQAError(Exception):
    """Base class for all repoqa failures."""


class DirectoryReadError(RepoQAError):
    """Raised when the walker cannot open or list a directory.

    Fatal to the whole indexing run; there is no partial-directory recovery.
    """

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Cannot read directory {path}: {cause}")
        self.path = path
        self.cause = cause


class ChunkingError(RepoQAError):
    """Raised when a file cannot be parsed into a syntax tree.

    Attributes:
        path: File that failed
        language: Language tag the parse was attempted with
    """

    def __init__(self, message: str, path: str, language: str):
        super().__init__(message)
        self.path = path
        self.language = language


class RetrievalError(RepoQAError):
    """Raised when the ranking executable fails or breaks its output contract."""


class CompletionError(RepoQAError):
    """Raised when the chat-completion call fails."""
