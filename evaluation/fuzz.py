"""Deterministic whitespace fuzzing utilities.

The helpers in this module perturb the whitespace of a document without
touching its tokens.  They stress the offset aligner, which has to recover
exact positions even when sentences are separated or broken up by tabs,
runs of spaces, line breaks and mixed line endings.

Examples of applied mutations:

* widening single spaces into runs of spaces
* replacing spaces with tabs
* extra line breaks and blank lines between words
* optional mixing of line ending styles

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.  The non-whitespace token sequence of the input is always
preserved.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable, Literal

_SPACE_RE = re.compile(" ")


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`mutate_text`.

    Attributes mirror the probabilities for each mutation.  ``max_variants``
    controls how many mutated versions :func:`variants` yields.
    """

    max_variants: int = 25
    widen_space_prob: float = 0.15
    tab_prob: float = 0.1
    linebreak_prob: float = 0.08
    blank_line_prob: float = 0.03
    eol_style: Literal["mixed", "lf", "crlf"] = "mixed"


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def _replace_spaces(text: str, rng: random.Random, opts: FuzzOptions) -> str:
    def repl(match: re.Match[str]) -> str:
        roll = rng.random()
        if roll < opts.blank_line_prob:
            return "\n\n"
        roll -= opts.blank_line_prob
        if roll < opts.linebreak_prob:
            return "\n"
        roll -= opts.linebreak_prob
        if roll < opts.tab_prob:
            return "\t"
        roll -= opts.tab_prob
        if roll < opts.widen_space_prob:
            return " " * rng.randint(2, 4)
        return match.group(0)

    return _SPACE_RE.sub(repl, text)


def random_eol_mix(text: str, rng: random.Random, style: Literal["mixed", "lf", "crlf"]) -> str:
    """Apply the requested line-ending style to ``text``."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if style == "lf":
        return text
    if style == "crlf":
        return text.replace("\n", "\r\n")
    parts = text.split("\n")
    out: list[str] = []
    for i, part in enumerate(parts):
        out.append(part)
        if i < len(parts) - 1:
            out.append("\r\n" if rng.random() < 0.5 else "\n")
    return "".join(out)


def mutate_text(text: str, *, seed: int, opts: FuzzOptions) -> str:
    """Return a fuzzed variant of ``text`` using ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    mutated = _replace_spaces(text, rng, opts)
    mutated = random_eol_mix(mutated, rng, opts.eol_style)
    if rng.random() < 0.3:
        mutated = " " * rng.randint(1, 3) + mutated + "\n"
    return mutated


def variants(text: str, *, base_seed: int, opts: FuzzOptions) -> Iterable[str]:
    """Yield deterministic fuzzed variants of ``text``."""

    for i in range(opts.max_variants):
        yield mutate_text(text, seed=base_seed + i, opts=opts)


__all__ = [
    "FuzzOptions",
    "mutate_text",
    "random_eol_mix",
    "rng_from_seed",
    "variants",
]
