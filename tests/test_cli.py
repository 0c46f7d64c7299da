"""Tests for cli — argument parsing and command dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli import EXIT_DIFFERENT, EXIT_EQUAL, EXIT_ERROR, build_parser, main
from config import settings


class TestBuildParser:
    def test_compare_args(self) -> None:
        args = build_parser().parse_args(["compare", "a.json", "b.json"])
        assert args.command == "compare"
        assert args.before == "a.json"
        assert args.after == "b.json"
        assert args.encoding is None
        assert args.verbose is False

    def test_compare_format(self) -> None:
        args = build_parser().parse_args(["compare", "a", "b", "--format", "yaml"])
        assert args.encoding == "yaml"

    def test_are_equal_files(self) -> None:
        args = build_parser().parse_args(["are-equal", "a", "b", "c"])
        assert args.files == ["a", "b", "c"]

    def test_serve_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False

    def test_verbose(self) -> None:
        args = build_parser().parse_args(["-v", "is-equal", "a", "b"])
        assert args.verbose is True


class TestCompareCommand:
    def test_equal_documents(self, doc_dir: Path, capsys) -> None:
        code = main(["compare", str(doc_dir / "before.json"), str(doc_dir / "same.json")])
        assert code == EXIT_EQUAL
        assert "NO DIFFERENCES FOUND" in capsys.readouterr().out

    def test_different_documents(self, doc_dir: Path, capsys) -> None:
        code = main(["compare", str(doc_dir / "before.json"), str(doc_dir / "after.json")])
        out = capsys.readouterr().out
        assert code == EXIT_DIFFERENT
        assert "+ owner" in out
        assert "- os" in out
        assert "~ port" in out

    def test_yaml_detected_from_extension(self, doc_dir: Path, capsys) -> None:
        code = main(["compare", str(doc_dir / "before.yaml"), str(doc_dir / "after.yml")])
        out = capsys.readouterr().out
        assert code == EXIT_DIFFERENT
        assert "Encoding:         YAML" in out

    def test_explicit_format(self, doc_dir: Path, capsys) -> None:
        code = main([
            "compare", str(doc_dir / "notes.txt"), str(doc_dir / "before.yaml"), "--format", "yml",
        ])
        assert code == EXIT_DIFFERENT
        assert "Deleted keys" not in capsys.readouterr().out

    def test_unknown_extension_uses_default(self, doc_dir: Path, monkeypatch) -> None:
        monkeypatch.setattr(settings, "DEFAULT_ENCODING", "yaml")
        code = main(["compare", str(doc_dir / "notes.txt"), str(doc_dir / "notes.txt")])
        assert code == EXIT_EQUAL

    def test_invalid_json(self, doc_dir: Path, capsys) -> None:
        code = main(["compare", str(doc_dir / "before.json"), str(doc_dir / "broken.json")])
        assert code == EXIT_ERROR
        assert "y is invalid json" in capsys.readouterr().err

    def test_missing_file(self, doc_dir: Path, capsys) -> None:
        code = main(["compare", str(doc_dir / "before.json"), str(doc_dir / "missing.json")])
        assert code == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_unsupported_format(self, doc_dir: Path, capsys) -> None:
        code = main([
            "compare", str(doc_dir / "before.json"), str(doc_dir / "after.json"), "--format", "xml",
        ])
        assert code == EXIT_ERROR
        assert "unsupported encoding" in capsys.readouterr().err


class TestIsEqualCommand:
    def test_identical_files(self, doc_dir: Path, capsys) -> None:
        code = main(["is-equal", str(doc_dir / "before.json"), str(doc_dir / "same.json")])
        assert code == EXIT_EQUAL
        assert capsys.readouterr().out.strip() == "equal"

    def test_different_files(self, doc_dir: Path, capsys) -> None:
        code = main(["is-equal", str(doc_dir / "before.json"), str(doc_dir / "after.json")])
        assert code == EXIT_DIFFERENT
        assert capsys.readouterr().out.strip() == "different"


class TestAreEqualCommand:
    def test_all_equal(self, doc_dir: Path, capsys) -> None:
        path = str(doc_dir / "before.json")
        code = main(["are-equal", path, str(doc_dir / "same.json"), path])
        assert code == EXIT_EQUAL
        assert "All 3 files are equal" in capsys.readouterr().out

    def test_first_difference(self, doc_dir: Path, capsys) -> None:
        code = main([
            "are-equal",
            str(doc_dir / "before.json"),
            str(doc_dir / "same.json"),
            str(doc_dir / "after.json"),
        ])
        assert code == EXIT_DIFFERENT
        assert "item #2" in capsys.readouterr().out

    @pytest.mark.parametrize("count, message", [(0, "no item"), (1, "only one item")])
    def test_too_few_files(self, doc_dir: Path, capsys, count: int, message: str) -> None:
        files = [str(doc_dir / "before.json")] * count
        code = main(["are-equal", *files])
        assert code == EXIT_ERROR
        assert message in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys) -> None:
        assert main([]) == EXIT_ERROR
        assert "usage:" in capsys.readouterr().out
