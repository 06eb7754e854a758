"""Paragraph and sentence numbering.

Sentence lists may contain ``""`` markers meaning "a new paragraph starts
here".  :func:`number_sentences` drops the markers and numbers the remaining
sentences.

``corrected`` mode advances the paragraph index at every marker except one at
position ``0``.  ``legacy`` mode reproduces Piao's segmenter, whose
counter update is a no-op, so every sentence lands in paragraph ``0``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sentsplitter.split.base import PARAGRAPH_MARKER, SplitMode


def number_sentences(
    sentences: Iterable[str], mode: SplitMode = "corrected"
) -> Iterator[tuple[int, int, str]]:
    """Yield ``(paragraph, sentence, text)`` for every non-marker entry."""

    paragraph = 0
    sentence = 0
    for position, text in enumerate(sentences):
        if text == PARAGRAPH_MARKER:
            if mode == "corrected" and position != 0:
                paragraph += 1
            continue
        yield paragraph, sentence, text
        sentence += 1


__all__ = ["number_sentences"]
