"""Immutable abbreviation / lowercase-term registry.

A :class:`Lexicon` is a value: extending it returns a new instance and leaves
the original untouched.  Splitters hold their own lexicon and replace it when
terms are added, so customising one splitter never affects another and a
split already in progress keeps reading the lexicon it started with.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from sentsplitter.lexicon.seeds import DEFAULT_ABBREVIATIONS, DEFAULT_LOWERCASE_TERMS
from sentsplitter.utils.errors import ensure_text


def _terms(values: Iterable[str], what: str) -> frozenset[str]:
    terms = frozenset(ensure_text(v, what) for v in values)
    if "" in terms:
        raise ValueError(f"{what} must not be empty")
    return terms


@dataclass(slots=True, frozen=True)
class Lexicon:
    """Abbreviations that block splits and lowercase terms that force them."""

    abbreviations: frozenset[str] = field(default_factory=frozenset)
    lowercase_terms: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def default(cls) -> "Lexicon":
        """Return the lexicon seeded with the built-in lists."""

        return cls(DEFAULT_ABBREVIATIONS, DEFAULT_LOWERCASE_TERMS)

    @classmethod
    def empty(cls) -> "Lexicon":
        return cls()

    def with_abbreviations(self, *terms: str) -> "Lexicon":
        """Return a copy with ``terms`` added to the abbreviations."""

        return replace(self, abbreviations=self.abbreviations | _terms(terms, "abbreviation"))

    def with_lowercase_terms(self, *terms: str) -> "Lexicon":
        """Return a copy with ``terms`` added to the lowercase terms."""

        added = _terms(terms, "lowercase term")
        return replace(self, lowercase_terms=self.lowercase_terms | added)

    def is_abbreviation(self, token: str) -> bool:
        """Return ``True`` if ``token`` or its lower-cased form is listed."""

        return token in self.abbreviations or token.lower() in self.abbreviations

    def is_lowercase_term(self, token: str) -> bool:
        return token in self.lowercase_terms


__all__ = ["Lexicon"]
