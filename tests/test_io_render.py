"""Tests for document reading and span rendering."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sentsplitter.io import read_document, render_spans, write_output
from sentsplitter.split.base import SentenceSpan


def test_read_document_preserves_newlines_and_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        f.write("A.\r\nB.")
    assert read_document(path) == "A.\r\nB."


def test_write_output_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "out.txt"
    write_output(path, "data\n")
    assert read_document(path) == "data\n"


def test_render_formats() -> None:
    text = "Hi.\nBye\tnow."
    spans = [SentenceSpan(0, 0, 0, 3), SentenceSpan(0, 1, 4, 12)]
    assert render_spans(spans, text, "text") == "0--3: Hi.\n4--12: Bye\tnow.\n"
    tsv = render_spans(spans, text, "tsv").splitlines()
    assert tsv[2] == "0\t1\t4\t12\t1\t0\tBye\\tnow."
    records = json.loads(render_spans(spans, text, "json"))
    assert records[1] == {
        "paragraph": 0,
        "sentence": 1,
        "start": 4,
        "end": 12,
        "line": 1,
        "col": 0,
        "text": "Bye\tnow.",
    }


def test_render_unknown_format() -> None:
    with pytest.raises(ValueError):
        render_spans([], "", "xml")  # type: ignore[arg-type]
