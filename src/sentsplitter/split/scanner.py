"""Candidate scanning.

:func:`scan_candidate` decomposes the unprocessed remainder of a document into
the five parts of a :class:`~sentsplitter.split.base.Candidate`:

1. ``prefix`` - the shortest leading stretch for which the other parts exist
2. ``end_token`` - a run of token characters ending in ``.``, ``!`` or ``?``
   plus any closing quotes or brackets
3. ``gap`` - the whitespace after it
4. ``next_start`` - the whole next whitespace-delimited token
5. ``rest`` - everything else, newlines included

Token characters are everything except whitespace and ``- : = + ' " ( [ {``.
The pattern is matched against the full remainder with ``.`` matching line
breaks, so the lazy prefix and the greedy tail behave exactly like those of
Piao's segmenter.
"""

from __future__ import annotations

import regex

from sentsplitter.split.base import Candidate
from sentsplitter.utils.constants import (
    CLOSING_CHARS,
    NON_WS,
    TERMINATOR_CHARS,
    TOKEN_EXCLUDED_CHARS,
    WHITESPACE_CHARS,
    WS,
    class_escape,
)

_TOKEN_CHAR = f"[^{class_escape(WHITESPACE_CHARS + TOKEN_EXCLUDED_CHARS)}]"
_END_TOKEN = f"{_TOKEN_CHAR}+[{class_escape(TERMINATOR_CHARS)}][{class_escape(CLOSING_CHARS)}]*"

CANDIDATE_RE = regex.compile(
    f"(?P<prefix>.*?)(?P<end_token>{_END_TOKEN})(?P<gap>{WS}+)(?P<next_start>{NON_WS}+)(?P<rest>.*)",
    regex.DOTALL,
)


def scan_candidate(remainder: str) -> Candidate | None:
    """Return the next candidate boundary in ``remainder`` or ``None``.

    ``None`` means no terminal punctuation in ``remainder`` is followed by
    whitespace and another token, so the remainder is the tail of the last
    sentence.
    """

    m = CANDIDATE_RE.fullmatch(remainder)
    if m is None:
        return None
    return Candidate(
        prefix=m.group("prefix"),
        end_token=m.group("end_token"),
        gap=m.group("gap"),
        next_start=m.group("next_start"),
        rest=m.group("rest"),
    )


__all__ = ["CANDIDATE_RE", "scan_candidate"]
