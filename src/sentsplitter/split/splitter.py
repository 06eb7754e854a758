"""Rule-based English sentence splitter.

:class:`EnglishSentenceSplitter` repeatedly scans the unprocessed remainder of
a document for the next candidate boundary, classifies it and either emits the
accumulated text as a sentence or keeps accumulating.  Its output follows the
conventions of Scott Piao's segmenter: :meth:`~EnglishSentenceSplitter.
split_paragraph` returns sentence strings and
:meth:`~EnglishSentenceSplitter.markup_raw_text` returns
``(paragraph, sentence, start, end)`` spans into the original text.

The splitter owns its :class:`~sentsplitter.lexicon.Lexicon`.  Adding a term
replaces that lexicon with an extended copy, so a split that is already
running keeps the terms it started with.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from sentsplitter.align.offsets import align_sentence
from sentsplitter.align.paragraphs import number_sentences
from sentsplitter.lexicon.registry import Lexicon
from sentsplitter.split.base import SPLIT_MODES, Boundary, SentenceSpan, SplitMode
from sentsplitter.split.classifier import classify
from sentsplitter.split.scanner import scan_candidate
from sentsplitter.utils.constants import trim
from sentsplitter.utils.errors import ensure_text
from sentsplitter.utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from sentsplitter.config import SplitterConfig

logger = get_logger(__name__)


class EnglishSentenceSplitter:
    """Split English text into sentences and locate them in the source."""

    def __init__(self, lexicon: Lexicon | None = None, *, mode: SplitMode = "corrected") -> None:
        if mode not in SPLIT_MODES:
            raise ValueError(f"mode must be one of {SPLIT_MODES}, got {mode!r}")
        self._lexicon = lexicon if lexicon is not None else Lexicon.default()
        self._mode: SplitMode = mode

    @classmethod
    def from_config(cls, cfg: "SplitterConfig") -> "EnglishSentenceSplitter":
        """Build a splitter from a loaded configuration."""

        settings = cfg.lexicon
        lexicon = Lexicon.default() if settings.include_defaults else Lexicon.empty()
        lexicon = lexicon.with_abbreviations(*settings.abbreviations)
        lexicon = lexicon.with_lowercase_terms(*settings.lowercase_terms)
        return cls(lexicon, mode=cfg.mode)

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def mode(self) -> SplitMode:
        return self._mode

    # ------------------------------------------------------------------
    # Registry updates
    # ------------------------------------------------------------------

    def add_abbreviation(self, term: str) -> None:
        """Register ``term`` as an abbreviation that blocks splits."""

        self._lexicon = self._lexicon.with_abbreviations(term)
        logger.debug("added abbreviation %r", term)

    def add_lowercase_term(self, term: str) -> None:
        """Register ``term`` as a sentence-initial term that forces splits.

        In ``legacy`` mode the term is added to the abbreviations instead,
        which is what Piao's segmenter does.
        """

        if self._mode == "legacy":
            self._lexicon = self._lexicon.with_abbreviations(term)
            logger.debug("legacy mode: lowercase term %r registered as abbreviation", term)
        else:
            self._lexicon = self._lexicon.with_lowercase_terms(term)
            logger.debug("added lowercase term %r", term)

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    def split_paragraph(self, text: str) -> list[str]:
        """Return the sentences of ``text`` in document order.

        Whitespace-only text yields a single ``""`` paragraph marker and empty
        text yields an empty list.
        """

        ensure_text(text)
        lexicon = self._lexicon
        result: list[str] = []
        remainder = text
        accumulator = ""

        while remainder:
            candidate = scan_candidate(remainder)
            if candidate is None:
                accumulator += remainder
                break

            accumulator += candidate.consumed
            remainder = candidate.remainder
            boundary = classify(candidate, lexicon)
            logger.debug("%s at %r", boundary.name, candidate.test)

            if boundary is Boundary.FORCE_SPLIT and self._mode == "legacy":
                result.append(accumulator)
                accumulator = ""
            elif boundary.splits:
                result.append(trim(accumulator))
                accumulator = ""

        if accumulator:
            result.append(trim(accumulator))
        return result

    def markup_sentences(self, sentences: Iterable[str], text: str) -> list[SentenceSpan]:
        """Number and align ``sentences`` against ``text``.

        ``sentences`` may contain ``""`` paragraph markers.  Sentences that
        cannot be located get estimated offsets rather than an error.
        """

        ensure_text(text)
        checked = [ensure_text(s, "sentence") for s in sentences]
        spans: list[SentenceSpan] = []
        end = 0
        for paragraph, index, sentence in number_sentences(checked, self._mode):
            begin, end = align_sentence(sentence, text, end)
            spans.append(SentenceSpan(paragraph, index, begin, end))
        return spans

    def markup_raw_text(self, text: str) -> list[SentenceSpan]:
        """Return ``(paragraph, sentence, start, end)`` for each sentence."""

        return self.markup_sentences(self.split_paragraph(text), text)


_DEFAULT_SPLITTER: EnglishSentenceSplitter | None = None


def _default_splitter() -> EnglishSentenceSplitter:
    global _DEFAULT_SPLITTER
    if _DEFAULT_SPLITTER is None:
        _DEFAULT_SPLITTER = EnglishSentenceSplitter()
    return _DEFAULT_SPLITTER


def split_paragraph(text: str) -> list[str]:
    """Split ``text`` with a shared splitter using the default lexicon."""

    return _default_splitter().split_paragraph(text)


def markup_raw_text(text: str) -> list[SentenceSpan]:
    """Locate the sentences of ``text`` with a shared default splitter."""

    return _default_splitter().markup_raw_text(text)


__all__ = ["EnglishSentenceSplitter", "markup_raw_text", "split_paragraph"]
