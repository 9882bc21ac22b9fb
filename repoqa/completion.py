"""Chat-completion call for the ask command.

Thin wrapper over the OpenAI SDK. The SDK reads OPENAI_API_KEY from the
environment itself.
"""

from collections.abc import Sequence
from typing import Any

from repoqa.exceptions import CompletionError
from repoqa.models import ChatMessage
from repoqa.utils.constants import CHAT_MODEL
from repoqa.utils.logging import logger


def complete(
    messages: Sequence[ChatMessage],
    model: str = CHAT_MODEL,
    client: Any = None,
) -> str:
    """Send messages to the chat-completion endpoint and return the answer text."""
    try:
        if client is None:
            from openai import OpenAI

            client = OpenAI()

        logger.debug(f"Requesting completion from {model} ({len(messages)} messages)")
        completion = client.chat.completions.create(
            model=model,
            messages=[message.to_dict() for message in messages],
        )
    except Exception as e:
        raise CompletionError(f"Chat completion failed: {e}") from e

    if not completion.choices:
        raise CompletionError("Chat completion returned no choices")
    return completion.choices[0].message.content or ""
