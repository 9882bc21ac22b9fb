"""Records exchanged between the indexer, the ranking executable and the ask flow."""

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class Chunk:
    """One syntactically-delimited unit of source code.

    `id` is only unique within a single file's extraction; use `(file, id)`
    for global identity. Serialized with camelCase keys, which is what the
    ranking executable reads from the chunk store.
    """

    id: str
    file: str
    code: str
    start_line: int
    end_line: int
    symbol: str
    type: str
    language: str | None = None
    source_type: Literal["ast", "line"] = "ast"

    def to_dict(self) -> dict[str, Any]:
        """Wire representation for one line of the chunk store."""
        return {
            "id": self.id,
            "file": self.file,
            "code": self.code,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "symbol": self.symbol,
            "type": self.type,
            "language": self.language,
            "sourceType": self.source_type,
        }


def _field(data: dict[str, Any], name: str, default: Any = None) -> Any:
    # The Go ranker marshals exported struct fields without json tags
    if name in data:
        return data[name]
    return data.get(name.upper() if name == "id" else name.capitalize(), default)


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk as returned by the ranking executable, with its relevance score."""

    id: str
    file: str
    code: str
    score: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScoredChunk":
        """Build from a ranker record; missing fields raise KeyError."""
        missing = [name for name in ("id", "file", "code") if _field(data, name) is None]
        if missing:
            raise KeyError(", ".join(missing))
        return cls(
            id=str(_field(data, "id")),
            file=str(_field(data, "file")),
            code=str(_field(data, "code")),
            score=float(_field(data, "score", 0.0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "file": self.file, "code": self.code, "score": self.score}


@dataclass(frozen=True)
class ChatMessage:
    """A role-tagged chat message."""

    role: Literal["system", "user"]
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
