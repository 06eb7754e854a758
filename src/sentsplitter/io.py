"""Reading documents and rendering sentence spans.

Documents are read without any newline translation so that span offsets index
the text exactly as stored on disk; a UTF-8 byte-order mark is consumed by the
default ``"utf-8-sig"`` codec.  Rendered output is written verbatim.

Output formats
--------------
``tsv``
    ``paragraph, sentence, start, end, line, col, text`` with tabs, newlines
    and backslashes in the text escaped.
``json``
    A list of objects with the same fields.
``text``
    ``start--end: text`` per sentence, the layout Piao's segmenter uses for its
    demonstration output.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from sentsplitter.split.base import SentenceSpan
from sentsplitter.utils.textspan import build_line_starts, char_to_line_col, span_text

OutputFormat = Literal["tsv", "json", "text"]
OUTPUT_FORMATS: tuple[str, ...] = ("tsv", "json", "text")

PathLikeStr = os.PathLike[str]

_TSV_HEADER = "paragraph\tsentence\tstart\tend\tline\tcol\ttext"


def read_document(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text document as-is.

    ``FileNotFoundError`` and other I/O errors propagate to the caller.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def write_output(path: str | PathLikeStr, text: str, *, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path``, creating parent directories."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\t", "\\t").replace("\r", "\\r").replace("\n", "\\n")


def span_records(spans: Sequence[SentenceSpan], text: str) -> list[dict[str, object]]:
    """Return one dictionary per span including its line/column and text."""

    line_starts = build_line_starts(text)
    records: list[dict[str, object]] = []
    for span in spans:
        line, col = char_to_line_col(min(span.start, len(text)), line_starts)
        records.append(
            {
                "paragraph": span.paragraph,
                "sentence": span.sentence,
                "start": span.start,
                "end": span.end,
                "line": line,
                "col": col,
                "text": span_text(text, span),
            }
        )
    return records


def render_spans(spans: Sequence[SentenceSpan], text: str, fmt: OutputFormat = "tsv") -> str:
    """Render ``spans`` over ``text`` in the requested format."""

    if fmt == "text":
        return "".join(f"{s.start}--{s.end}: {span_text(text, s)}\n" for s in spans)
    records = span_records(spans, text)
    if fmt == "json":
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"
    if fmt == "tsv":
        rows = [_TSV_HEADER]
        for rec in records:
            fields = [str(rec[k]) for k in ("paragraph", "sentence", "start", "end", "line", "col")]
            rows.append("\t".join(fields + [_escape(str(rec["text"]))]))
        return "\n".join(rows) + "\n"
    raise ValueError(f"unsupported output format: {fmt!r}")


__all__ = [
    "OUTPUT_FORMATS",
    "OutputFormat",
    "read_document",
    "render_spans",
    "span_records",
    "write_output",
]
