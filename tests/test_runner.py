"""End-to-end tests for an indexing run over a real directory tree."""

import pytest

from repoqa.indexer import chunker, runner
from repoqa.exceptions import DirectoryReadError
from repoqa.indexer.runner import read_source, run_index


class TestRunIndex:
    """run_index walks, filters, chunks and writes."""

    def test_indexes_supported_files(self, make_tree, go_source, ts_class_source, read_store, tmp_path):
        root = make_tree({
            "cmd/main.go": go_source,
            "web/greeter.ts": ts_class_source,
            "web/greeter.test.ts": ts_class_source,
            "web/types.d.ts": "declare function x(): void;\n",
            "docs/README.md": "# docs\n",
            "notes.txt": "function notCode() {}\n",
        })
        store = tmp_path / "out" / "chunked.jsonl"

        stats = run_index(root.as_posix(), store)

        records = read_store(store)
        assert len(records) == 6
        assert {r["file"].rsplit("/", 1)[-1] for r in records} == {"main.go", "greeter.ts"}
        assert stats["files_indexed"] == 2
        assert stats["chunks_written"] == 6
        assert stats["files_skipped"] == 4
        assert stats["files_seen"] == 6
        assert stats["files_failed"] == 0

    def test_records_in_emission_order(self, make_tree, go_source, read_store, tmp_path):
        root = make_tree({"main.go": go_source})
        store = tmp_path / "chunked.jsonl"

        run_index(root.as_posix(), store)

        records = read_store(store)
        assert [r["id"] for r in records] == ["chunk_0", "chunk_1", "chunk_2"]
        assert [r["symbol"] for r in records] == ["Start", "stop", "Handle"]
        assert records[0]["file"] == f"{root.as_posix()}/main.go"

    def test_only_excluded_paths_gives_empty_store(self, make_tree, tmp_path):
        root = make_tree({
            ".git/hooks/update.go": "package hooks\nfunc Run() {}\n",
            "node_modules/x/index.js": "function x() {}\n",
        })
        store = tmp_path / "chunked.jsonl"
        store.write_text("old\n", encoding="utf-8")

        stats = run_index(root.as_posix(), store)

        assert store.read_text(encoding="utf-8") == ""
        assert stats["chunks_written"] == 0

    def test_undecodable_file_is_skipped(self, make_tree, go_source, read_store, tmp_path):
        root = make_tree({
            "good.go": go_source,
            "corrupt.go": b"package main\n\xff\xfe\xfa func broken(",
        })
        store = tmp_path / "chunked.jsonl"

        stats = run_index(root.as_posix(), store)

        assert stats["files_failed"] == 1
        assert stats["files_indexed"] == 1
        assert len(read_store(store)) == 3

    def test_parse_failure_counts_as_failed(
        self, make_tree, go_source, read_store, tmp_path, monkeypatch, log_records
    ):
        root = make_tree({"a.go": go_source, "b.js": "function b() {}\n"})
        real_get_parser = chunker.get_parser

        class ExplodingParser:
            def parse(self, data):
                raise RuntimeError("grammar panic")

        monkeypatch.setattr(
            chunker,
            "get_parser",
            lambda lang: ExplodingParser() if lang == "go" else real_get_parser(lang),
        )
        store = tmp_path / "chunked.jsonl"

        stats = run_index(root.as_posix(), store)

        records = read_store(store)
        assert [r["symbol"] for r in records] == ["b"]
        assert stats["files_failed"] == 1
        assert stats["files_indexed"] == 1
        assert any("AST chunking failed" in m for m in log_records.messages("ERROR"))

    def test_large_files_skipped(self, make_tree, go_source, read_store, tmp_path):
        root = make_tree({"big.go": go_source})
        store = tmp_path / "chunked.jsonl"

        stats = run_index(root.as_posix(), store, max_file_size=10)

        assert read_store(store) == []
        assert stats["files_skipped"] == 1

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run_index((tmp_path / "nope").as_posix(), tmp_path / "chunked.jsonl")

    def test_directory_error_closes_store(self, make_tree, go_source, tmp_path, monkeypatch):
        root = make_tree({"a.go": go_source})
        store = tmp_path / "chunked.jsonl"
        writers = []
        real_writer = runner.ChunkWriter

        def tracking_writer(path):
            writer = real_writer(path)
            writers.append(writer)
            return writer

        def failing_walk(path):
            yield f"{root.as_posix()}/a.go"
            raise DirectoryReadError(f"{path}/locked", PermissionError("denied"))

        monkeypatch.setattr(runner, "ChunkWriter", tracking_writer)
        monkeypatch.setattr(runner, "walk", failing_walk)

        with pytest.raises(DirectoryReadError):
            run_index(root.as_posix(), store)

        assert writers[0].closed
        # records written before the failure are complete lines
        assert store.read_text(encoding="utf-8").count("\n") == 3

    def test_rerun_is_byte_identical(self, make_tree, go_source, ts_class_source, tmp_path):
        root = make_tree({"main.go": go_source, "g.ts": ts_class_source})
        store = tmp_path / "chunked.jsonl"

        run_index(root.as_posix(), store)
        first = store.read_bytes()
        run_index(root.as_posix(), store)

        assert store.read_bytes() == first


class TestReadSource:

    def test_preserves_crlf(self, make_tree):
        root = make_tree({"a.go": "package a\r\n"})
        assert read_source((root / "a.go").as_posix()) == "package a\r\n"

    def test_rejects_invalid_utf8(self, make_tree):
        root = make_tree({"a.go": b"\xff\xfe"})
        with pytest.raises(UnicodeDecodeError):
            read_source((root / "a.go").as_posix())
