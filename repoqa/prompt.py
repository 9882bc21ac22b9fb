"""Prompt assembly for the ask command."""

from collections.abc import Sequence

from repoqa.models import ChatMessage, ScoredChunk

SYSTEM_PROMPT = (
    "You are a senior engineer answering questions about a codebase. "
    "Use only the provided code snippets to answer. If code reveals config, "
    "structure, or usage patterns, summarize those clearly. Do not guess or "
    "include general explanations unless they are directly inferred from the code."
)


def build_prompt(query: str, chunks: Sequence[ScoredChunk]) -> list[ChatMessage]:
    """Build the system + user message pair for a question.

    Chunks are appended to the user message in ranking order.
    """
    prompt = f"Question: {query}\n\nRelevant Code:\n\n"
    for chunk in chunks:
        prompt += f"\n---\nFile: {chunk.file}\n{chunk.code}\n"

    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=prompt),
    ]
