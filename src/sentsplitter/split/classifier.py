"""Boundary classification.

Each candidate is tested against an ordered rule table; the first rule that
applies decides the outcome.  ``test`` below is
``end_token + gap + next_start``.

Forced splits (checked first):

* ``next_start`` is a registered lowercase term (``mRNA``, ``iPad``, ``ii``)
* ``test`` is a stop followed by closing quotes or brackets, e.g. ``war." He``
* ``test`` ends in ``!`` or ``?``
* ``next_start`` is an e-word such as ``eCommerce`` or ``iPhone``

Blocked splits:

* ``test`` is a period followed by a lower-case word, e.g. ``approx. three``
* ``end_token`` is an abbreviation, exactly or once lower-cased

Anything else is a default split.
"""

from __future__ import annotations

import regex

from sentsplitter.lexicon.registry import Lexicon
from sentsplitter.split.base import Boundary, Candidate
from sentsplitter.utils.constants import CLOSING_CHARS, NON_WS, WS, class_escape

_CLOSERS = f"[{class_escape(CLOSING_CHARS)}]"

CLOSED_STOP_RE = regex.compile(f"{NON_WS}+[.!?]{_CLOSERS}+{WS}+{NON_WS}+")
EXCLAMATION_RE = regex.compile(f"{NON_WS}+[!?]{WS}+{NON_WS}+")
LOWERCASE_CONTINUATION_RE = regex.compile(rf"{NON_WS}+\.{WS}+\p{{Ll}}{NON_WS}*")
EWORD_RE = regex.compile("[eim][A-Z][A-Za-z]+")


def forces_split(candidate: Candidate, lexicon: Lexicon) -> bool:
    test = candidate.test
    return (
        lexicon.is_lowercase_term(candidate.next_start)
        or CLOSED_STOP_RE.fullmatch(test) is not None
        or EXCLAMATION_RE.fullmatch(test) is not None
        or EWORD_RE.fullmatch(candidate.next_start) is not None
    )


def blocks_split(candidate: Candidate, lexicon: Lexicon) -> bool:
    return (
        LOWERCASE_CONTINUATION_RE.fullmatch(candidate.test) is not None
        or lexicon.is_abbreviation(candidate.end_token)
    )


def classify(candidate: Candidate, lexicon: Lexicon) -> Boundary:
    """Decide whether ``candidate`` ends a sentence."""

    if forces_split(candidate, lexicon):
        return Boundary.FORCE_SPLIT
    if blocks_split(candidate, lexicon):
        return Boundary.BLOCK_SPLIT
    return Boundary.DEFAULT_SPLIT


__all__ = [
    "CLOSED_STOP_RE",
    "EWORD_RE",
    "EXCLAMATION_RE",
    "LOWERCASE_CONTINUATION_RE",
    "blocks_split",
    "classify",
    "forces_split",
]
