"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest

from repoqa.utils.logging import logger


@pytest.fixture(autouse=True)
def isolated_error_log(tmp_path, monkeypatch):
    """Keep handle_exceptions from writing error.log into the working tree."""
    monkeypatch.setattr(
        "repoqa.utils.error_handler.ERROR_LOG_FILE", tmp_path / "logs" / "error.log"
    )


class LogCapture:
    """Loguru records captured during a test."""

    def __init__(self):
        self.records = []

    def sink(self, message):
        self.records.append(message.record)

    def messages(self, level: str) -> list[str]:
        return [r["message"] for r in self.records if r["level"].name == level]


@pytest.fixture
def log_records():
    """Capture loguru output for assertions on diagnostics."""
    capture = LogCapture()
    handler_id = logger.add(capture.sink, level="DEBUG", format="{message}")
    yield capture
    logger.remove(handler_id)


@pytest.fixture
def make_tree(tmp_path):
    """Create files under a fresh project root.

    Usage: root = make_tree({"src/main.go": "package main"})
    """

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_bytes(content.encode("utf-8"))
        return root

    return _make


@pytest.fixture
def read_store():
    """Load a chunk store as a list of dicts."""
    import json

    def _read(path: Path) -> list[dict]:
        with open(path, encoding="utf-8") as f:
            return [json.loads(line) for line in f]

    return _read


GO_SOURCE = """package main

type Server struct{}

func Start() error {
	return nil
}

func stop(code int) {}

func (s *Server) Handle(path string) string {
	return path
}
"""

TS_CLASS_SOURCE = """export class Greeter {
  greet(name: string): string {
    return `hi ${name}`;
  }

  farewell(): void {}
}
"""


@pytest.fixture
def go_source() -> str:
    return GO_SOURCE


@pytest.fixture
def ts_class_source() -> str:
    return TS_CLASS_SOURCE
