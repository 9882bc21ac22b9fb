"""Tests for prompt assembly and the chat-completion wrapper."""

from types import SimpleNamespace

import pytest

from repoqa.completion import complete
from repoqa.exceptions import CompletionError
from repoqa.models import ChatMessage, ScoredChunk
from repoqa.prompt import SYSTEM_PROMPT, build_prompt


@pytest.fixture
def scored_chunks():
    return [
        ScoredChunk(id="chunk_0", file="cmd/main.go", code="func main() {}", score=0.9),
        ScoredChunk(id="chunk_3", file="web/app.ts", code="class App {}", score=0.7),
    ]


class TestBuildPrompt:

    def test_two_role_tagged_messages(self, scored_chunks):
        system, user = build_prompt("What starts the server?", scored_chunks)

        assert system == ChatMessage(role="system", content=SYSTEM_PROMPT)
        assert user.role == "user"

    def test_user_message_layout(self, scored_chunks):
        _, user = build_prompt("What starts the server?", scored_chunks)

        assert user.content == (
            "Question: What starts the server?\n\nRelevant Code:\n\n"
            "\n---\nFile: cmd/main.go\nfunc main() {}\n"
            "\n---\nFile: web/app.ts\nclass App {}\n"
        )

    def test_no_chunks(self):
        _, user = build_prompt("anything?", [])
        assert user.content == "Question: anything?\n\nRelevant Code:\n\n"


class FakeCompletions:
    def __init__(self, content="The server starts in main.", error=None):
        self.content = content
        self.error = error
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


class TestComplete:

    def test_returns_first_choice(self, scored_chunks):
        completions = FakeCompletions()
        messages = build_prompt("q", scored_chunks)

        answer = complete(messages, model="gpt-4", client=fake_client(completions))

        assert answer == "The server starts in main."
        request = completions.requests[0]
        assert request["model"] == "gpt-4"
        assert [m["role"] for m in request["messages"]] == ["system", "user"]

    def test_sdk_errors_wrapped(self):
        completions = FakeCompletions(error=RuntimeError("rate limited"))

        with pytest.raises(CompletionError, match="rate limited"):
            complete([ChatMessage(role="user", content="q")], client=fake_client(completions))

    def test_no_choices(self):
        class Empty:
            def create(self, **kwargs):
                return SimpleNamespace(choices=[])

        with pytest.raises(CompletionError):
            complete([ChatMessage(role="user", content="q")], client=fake_client(Empty()))

    def test_null_content_becomes_empty(self):
        answer = complete(
            [ChatMessage(role="user", content="q")],
            client=fake_client(FakeCompletions(content=None)),
        )
        assert answer == ""
