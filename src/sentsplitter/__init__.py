"""Rule-based English sentence boundary detection with exact offsets.

The splitter output is compatible with Scott Piao's sentence/paragraph
detector: sentence strings from :func:`split_paragraph` and
``(paragraph, sentence, start, end)`` spans from :func:`markup_raw_text`.
The command line interface lives in :mod:`sentsplitter.cli`.
"""

from .lexicon import Lexicon
from .split import (
    Boundary,
    Candidate,
    EnglishSentenceSplitter,
    SentenceSpan,
    SplitMode,
    markup_raw_text,
    split_paragraph,
)
from .utils.errors import InvalidTextError, SplitterError

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "Candidate",
    "EnglishSentenceSplitter",
    "InvalidTextError",
    "Lexicon",
    "SentenceSpan",
    "SplitMode",
    "SplitterError",
    "__version__",
    "markup_raw_text",
    "split_paragraph",
]
