"""Offset realignment.

Sentence strings come out of the splitter trimmed, and callers may hand in
strings whose whitespace no longer matches the document (tabs turned into
spaces, collapsed newlines).  The functions here recover document offsets by
searching for the sentence's space-delimited words in order.

Alignment never raises.  A first word that cannot be found places the
sentence one character after the previous end; a later word that cannot be
found advances the running position by its length.  Such estimates can point
past the end of the document.

Each word is located with a substring search starting at the previous match,
so the cost is quadratic in the number of words of a sentence.  That is fine
for real sentences but slow for very long unpunctuated input.
"""

from __future__ import annotations

from sentsplitter.utils.logging import get_logger

logger = get_logger(__name__)


def sentence_words(sentence: str) -> list[str]:
    """Split ``sentence`` on single spaces, dropping trailing empty words.

    Leading and interior empty words are kept; they match at the current
    position and so do not move it.
    """

    words = sentence.split(" ")
    while words and not words[-1]:
        words.pop()
    return words


def start_of_sentence(sentence: str, document: str, last_end: int) -> int:
    """Return the document offset where ``sentence`` starts."""

    words = sentence_words(sentence)
    first = words[0] if words else ""
    begin = document.find(first, max(last_end, 0))
    if begin == -1:
        logger.debug("first word %r not found after offset %d", first, last_end)
        return last_end + 1
    return begin


def end_of_sentence(sentence: str, document: str, begin: int) -> int:
    """Return the document offset just past the end of ``sentence``."""

    end = max(begin - 1, 0)
    for word in sentence_words(sentence) or [""]:
        found = document.find(word, end)
        if found == -1:
            logger.debug("word %r not found after offset %d; estimating", word, end)
            end += len(word)
        else:
            end = found + len(word)
    return max(end, begin)


def align_sentence(sentence: str, document: str, last_end: int) -> tuple[int, int]:
    """Return ``(start, end)`` of ``sentence`` searching from ``last_end``."""

    begin = start_of_sentence(sentence, document, last_end)
    return begin, end_of_sentence(sentence, document, begin)


__all__ = ["align_sentence", "end_of_sentence", "sentence_words", "start_of_sentence"]
