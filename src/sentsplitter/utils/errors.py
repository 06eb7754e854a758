"""Typed exceptions raised by the sentence splitter."""


class SplitterError(Exception):
    """Base class for sentence splitter errors."""


class InvalidTextError(SplitterError, TypeError):
    """Raised when text or a registry term is ``None`` or not a ``str``."""


def ensure_text(value: object, what: str = "text") -> str:
    """Return ``value`` unchanged if it is a ``str``; raise otherwise."""

    if not isinstance(value, str):
        raise InvalidTextError(f"{what} must be a str, got {type(value).__name__}")
    return value
