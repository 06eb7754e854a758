"""Abbreviation and lowercase-term registries.

The default lists live in :mod:`sentsplitter.lexicon.seeds`; the immutable
:class:`Lexicon` value built from them is what splitters consume.
"""

from .registry import Lexicon
from .seeds import DEFAULT_ABBREVIATIONS, DEFAULT_LOWERCASE_TERMS

__all__ = ["DEFAULT_ABBREVIATIONS", "DEFAULT_LOWERCASE_TERMS", "Lexicon"]
