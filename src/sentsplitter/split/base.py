"""Core splitting primitives.

This module defines the small strongly-typed values shared by the scanner,
the boundary classifier, the paragraph segmenter and the offset aligner.
Sentence spans follow the half-open interval convention ``[start, end)``
where ``start`` is inclusive and ``end`` is exclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, NamedTuple

SplitMode = Literal["legacy", "corrected"]
"""Selects between output parity with Piao's segmenter and fixed behaviour.

``legacy`` keeps three quirks of Piao's segmenter: forced splits emit
untrimmed text, the paragraph counter never advances and
``add_lowercase_term`` registers an abbreviation.  ``corrected`` fixes all
three.
"""

SPLIT_MODES: tuple[SplitMode, ...] = ("legacy", "corrected")
PARAGRAPH_MARKER = ""


class Boundary(Enum):
    """Outcome of classifying a single candidate."""

    FORCE_SPLIT = "force_split"
    BLOCK_SPLIT = "block_split"
    DEFAULT_SPLIT = "default_split"

    @property
    def splits(self) -> bool:
        """Return ``True`` when the candidate ends a sentence."""

        return self is not Boundary.BLOCK_SPLIT


@dataclass(slots=True, frozen=True)
class Candidate:
    """Five-part decomposition of the unprocessed remainder of a document.

    ``prefix + end_token + gap + next_start + rest`` always reproduces the
    remainder the candidate was scanned from.
    """

    prefix: str
    end_token: str
    gap: str
    next_start: str
    rest: str

    @property
    def test(self) -> str:
        """Return the window the boundary rules are evaluated on."""

        return self.end_token + self.gap + self.next_start

    @property
    def consumed(self) -> str:
        """Return the text that joins the sentence accumulator."""

        return self.prefix + self.end_token

    @property
    def remainder(self) -> str:
        """Return the text left to scan after this candidate."""

        return self.gap + self.next_start + self.rest


class SentenceSpan(NamedTuple):
    """Position of one sentence in the original document.

    Being a named tuple, a span compares equal to the plain
    ``(paragraph, sentence, start, end)`` tuple.
    """

    paragraph: int
    sentence: int
    start: int
    end: int

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start


__all__ = [
    "Boundary",
    "Candidate",
    "PARAGRAPH_MARKER",
    "SPLIT_MODES",
    "SentenceSpan",
    "SplitMode",
]
