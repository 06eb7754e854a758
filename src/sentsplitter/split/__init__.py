"""Candidate scanning, boundary classification and the splitting loop."""

from .base import Boundary, Candidate, SentenceSpan, SplitMode
from .classifier import classify
from .scanner import scan_candidate
from .splitter import EnglishSentenceSplitter, markup_raw_text, split_paragraph

__all__ = [
    "Boundary",
    "Candidate",
    "EnglishSentenceSplitter",
    "SentenceSpan",
    "SplitMode",
    "classify",
    "markup_raw_text",
    "scan_candidate",
    "split_paragraph",
]
