"""Tests for the ordered boundary rule table."""

from __future__ import annotations

import pytest

from sentsplitter.lexicon import Lexicon
from sentsplitter.split.base import Boundary, Candidate
from sentsplitter.split.classifier import classify
from sentsplitter.split.scanner import scan_candidate


def _candidate(text: str) -> Candidate:
    c = scan_candidate(text)
    assert c is not None
    return c


@pytest.mark.parametrize(
    "text",
    [
        "Levels fell. mRNA rose.",  # lowercase term
        'He said "no." Then left.',  # closing quote after the stop
        "Is it (really?) sure.",  # closing bracket after the stop
        "Stop! now please.",  # exclamation before a lower-case word
        "At the shop. eBay sells more.",  # e-word
        "Fig. ii shows it.",  # lowercase term beats the abbreviation
    ],
)
def test_force_split(text: str) -> None:
    assert classify(_candidate(text), Lexicon.default()) is Boundary.FORCE_SPLIT


@pytest.mark.parametrize(
    "text",
    [
        "Dr. Smith went home.",
        "Smith CO. Was fined.",  # lower-cased form is listed
        "It rose approx. three percent.",  # period then lower-case word
    ],
)
def test_block_split(text: str) -> None:
    assert classify(_candidate(text), Lexicon.default()) is Boundary.BLOCK_SPLIT


def test_default_split() -> None:
    c = _candidate("He went home. He left.")
    assert classify(c, Lexicon.default()) is Boundary.DEFAULT_SPLIT


def test_abbreviation_needs_lexicon() -> None:
    c = _candidate("Dr. Smith went home.")
    assert classify(c, Lexicon.empty()) is Boundary.DEFAULT_SPLIT


def test_lowercase_continuation_blocks_without_lexicon() -> None:
    c = _candidate("It rose approx. three percent.")
    assert classify(c, Lexicon.empty()) is Boundary.BLOCK_SPLIT


def test_boundary_splits_flag() -> None:
    assert Boundary.FORCE_SPLIT.splits
    assert Boundary.DEFAULT_SPLIT.splits
    assert not Boundary.BLOCK_SPLIT.splits
