"""Shared character tables used by the scanner, the rules and the aligner."""

from __future__ import annotations

__all__ = [
    "WHITESPACE_CHARS",
    "TERMINATOR_CHARS",
    "CLOSING_CHARS",
    "TOKEN_EXCLUDED_CHARS",
    "TRIM_CHARS",
    "WS",
    "NON_WS",
    "class_escape",
    "trim",
]

# ASCII whitespace only; non-breaking spaces are ordinary token characters.
WHITESPACE_CHARS: str = " \t\n\x0b\f\r"
TERMINATOR_CHARS: str = ".!?"
CLOSING_CHARS: str = "'\")]}>"
# Space and every control character below it.
TRIM_CHARS: str = "".join(chr(c) for c in range(0x21))
# Characters that may not appear inside a sentence-final token.
TOKEN_EXCLUDED_CHARS: str = "-:=+'\"([{"


def class_escape(chars: str) -> str:
    """Escape ``chars`` for use inside a regular expression character class."""

    specials = set("\\]^-[")
    return "".join("\\" + ch if ch in specials else ch for ch in chars)


WS: str = f"[{class_escape(WHITESPACE_CHARS)}]"
NON_WS: str = f"[^{class_escape(WHITESPACE_CHARS)}]"


def trim(text: str) -> str:
    """Strip leading and trailing ``TRIM_CHARS`` from ``text``.

    Control characters are trimmed along with whitespace even though they
    count as token characters while scanning.
    """

    return text.strip(TRIM_CHARS)
