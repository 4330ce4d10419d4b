"""Tests for loading Turtle files from disk."""

import gzip
from pathlib import Path
from typing import Callable

import pytest

from ttlstream.config import ParserConfig, UnrecognizedLinePolicy
from ttlstream.errors import NotATurtleError
from ttlstream.loader import iter_lines, load_turtle_document


class TestLoadTurtleDocument:
    """load_turtle_document streams plain and gzip files."""

    def test_plain_file(self, write_ttl: Callable[..., Path], ontology_lines: list[str]) -> None:
        path = write_ttl(ontology_lines)
        result = load_turtle_document(path)

        assert len(result.document.headers) == 7
        assert len(result.document.body) == 3
        assert not result.truncated

    def test_gzip_file(self, tmp_path: Path, ontology_lines: list[str]) -> None:
        path = tmp_path / "ontology.ttl.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write("\n".join(ontology_lines) + "\n")

        result = load_turtle_document(path)
        assert len(result.document.body) == 3

    def test_crlf_line_endings(self, tmp_path: Path, header_lines: list[str]) -> None:
        path = tmp_path / "crlf.ttl"
        path.write_bytes("\r\n".join(header_lines).encode("utf-8"))

        result = load_turtle_document(path)
        assert result.document.headers[0].raw_line == header_lines[0]

    def test_byte_order_mark(self, tmp_path: Path) -> None:
        """A leading BOM does not hide the first declaration."""
        path = tmp_path / "bom.ttl"
        path.write_text(
            "\ufeff@prefix cco: <http://example.org/cco#> .\ncco:A rdf:type owl:Class .\n",
            encoding="utf-8",
        )

        result = load_turtle_document(path)
        assert len(result.document.headers) == 1
        assert result.document.headers[0].namespace == "cco"
        assert result.document.headers[0].raw_line == "@prefix cco: <http://example.org/cco#> ."
        assert [s.subject for s in result.document.body] == ["cco:A"]
        assert len(result.diagnostics) == 0

    def test_truncated_file(self, write_ttl: Callable[..., Path]) -> None:
        path = write_ttl(["cco:Foo rdf:type owl:Class ;"])
        result = load_turtle_document(path)
        assert result.truncated
        assert result.document.body == []

    def test_abort_policy(self, write_ttl: Callable[..., Path]) -> None:
        path = write_ttl(["<html>", "cco:Foo rdf:type owl:Class ."])
        config = ParserConfig(unrecognized_policy=UnrecognizedLinePolicy.ABORT)
        with pytest.raises(NotATurtleError):
            load_turtle_document(path, config=config)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_turtle_document(tmp_path / "missing.ttl")


class TestIterLines:
    """iter_lines yields lines lazily."""

    def test_yields_lines(self, write_ttl: Callable[..., Path]) -> None:
        path = write_ttl(["# one", "# two"])
        assert [line.rstrip("\n") for line in iter_lines(path)] == ["# one", "# two"]
