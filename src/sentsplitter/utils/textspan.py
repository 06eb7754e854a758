"""Utility functions for working with sentence spans.

The helpers in this module are pure.  Spans are half-open intervals
``[start, end)`` into the original document.  Offsets produced by the
alignment fallback may point past the end of the document; :func:`span_text`
clips them the way ordinary slicing does.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from sentsplitter.split.base import SentenceSpan


def build_line_starts(text: str) -> tuple[int, ...]:
    """Return the starting character index for each line in ``text``."""

    starts = [0]
    for idx, char in enumerate(text):
        if char == "\n":
            starts.append(idx + 1)
    return tuple(starts)


def char_to_line_col(index: int, line_starts: tuple[int, ...]) -> tuple[int, int]:
    """Convert a character index to ``(line, col)`` using ``line_starts``.

    Line and column numbers are zero-based.
    """

    if index < 0:
        raise ValueError("index must be non-negative")
    line = bisect_right(line_starts, index) - 1
    if line < 0:
        line = 0
    col = index - line_starts[line]
    return line, col


def span_text(text: str, span: SentenceSpan) -> str:
    """Return the slice of ``text`` covered by ``span``."""

    return text[span.start : span.end]


def is_document_ordered(spans: Sequence[SentenceSpan]) -> bool:
    """Return ``True`` when starts and ends never move backwards.

    Each span must also satisfy ``start <= end``.
    """

    for span in spans:
        if span.start > span.end:
            return False
    for prev, cur in zip(spans, spans[1:]):
        if cur.start < prev.start or cur.end < prev.end:
            return False
    return True


__all__ = [
    "build_line_starts",
    "char_to_line_col",
    "is_document_ordered",
    "span_text",
]
