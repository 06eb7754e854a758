from sentsplitter.utils.constants import (
    CLOSING_CHARS,
    TOKEN_EXCLUDED_CHARS,
    TRIM_CHARS,
    WHITESPACE_CHARS,
    class_escape,
    trim,
)


def test_character_tables() -> None:
    assert set(".!?").isdisjoint(TOKEN_EXCLUDED_CHARS)
    assert ">" in CLOSING_CHARS and "(" not in CLOSING_CHARS
    assert " " in WHITESPACE_CHARS
    assert "\xa0" not in WHITESPACE_CHARS
    assert set(WHITESPACE_CHARS) <= set(TRIM_CHARS)
    assert max(TRIM_CHARS) == " " and len(TRIM_CHARS) == 0x21


def test_class_escape() -> None:
    assert class_escape("-]^a") == "\\-\\]\\^a"


def test_trim_strips_whitespace_and_control_chars() -> None:
    assert trim(" \t\r\n x y \x0b\f") == "x y"
    assert trim("\x00\x1fx\x07y\x7f") == "x\x07y\x7f"
    assert trim("\xa0x\xa0") == "\xa0x\xa0"
