"""Tests for offset realignment helpers."""

from __future__ import annotations

from sentsplitter.align.offsets import (
    align_sentence,
    end_of_sentence,
    sentence_words,
    start_of_sentence,
)


def test_sentence_words_keeps_leading_and_interior_empties() -> None:
    assert sentence_words("a  b") == ["a", "", "b"]
    assert sentence_words(" a") == ["", "a"]
    assert sentence_words("a  ") == ["a"]
    assert sentence_words("   ") == []
    assert sentence_words("a\tb\nc") == ["a\tb\nc"]


def test_start_found_and_fallback() -> None:
    doc = "One. Two."
    assert start_of_sentence("Two.", doc, 4) == 5
    assert start_of_sentence("Three.", doc, 4) == 5
    assert start_of_sentence("Three.", doc, 9) == 10


def test_end_at_document_start_does_not_wrap() -> None:
    assert end_of_sentence("abc", "abc abc", 0) == 3


def test_end_estimates_missing_words() -> None:
    doc = "alpha beta gamma"
    assert end_of_sentence("alpha zeta gamma", doc, 0) == 16
    assert end_of_sentence("alpha zeta", doc, 0) == 9


def test_blank_sentence_aligns_to_empty_span() -> None:
    assert align_sentence("   ", "x   y", 1) == (1, 1)


def test_align_with_whitespace_drift() -> None:
    doc = "Hello\tthere.  How  are\nyou?"
    assert align_sentence("Hello\tthere.", doc, 0) == (0, 12)
    assert align_sentence("How  are\nyou?", doc, 12) == (14, 27)
