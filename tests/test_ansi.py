import pytest

from quizline.ansi import (
    AnsiEscapeSequence,
    ansi_aware_chars,
    ansi_stripped_chars,
    strip_ansi,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1\x1b[0m2", "12"),
        ("\x1b[92mHello, \x1b[91mWorld!\x1b[0m", "Hello, World!"),
        ("\x1b[7@Hi", "Hi"),
        ("\x1b]0;Set The Terminal Title To This\u009cPrint This", "Print This"),
        ("\x1b[96", ""),
    ],
)
def test_normal_ansi_escapes(text, expected):
    assert strip_ansi(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\x1b[\x1b]String\u009cHello World", "Hello World"),
        ("\x1b[\x1b[38;5;43mAB\x1b[48;5;10mCD\x1b[0m", "ABCD"),
        ("\x1b\x19[96mCat\x1b[0m\n", "Cat\n"),
    ],
)
def test_inconsistencies(text, expected):
    assert strip_ansi(text) == expected


def test_stripped_chars_yields_single_characters():
    assert list(ansi_stripped_chars("a\x1b[1mb")) == ["a", "b"]


def test_ansi_aware_normal_escapes():
    chars = list(ansi_aware_chars("\x1b[92mHello, \x1b[91mWorld!\x1b[0m"))
    assert chars == [
        AnsiEscapeSequence("\x1b[92m"),
        "H",
        "e",
        "l",
        "l",
        "o",
        ",",
        " ",
        AnsiEscapeSequence("\x1b[91m"),
        "W",
        "o",
        "r",
        "l",
        "d",
        "!",
        AnsiEscapeSequence("\x1b[0m"),
    ]


def test_ansi_aware_osc_string():
    chars = list(ansi_aware_chars("\x1b]0;Set The Terminal Title To This\u009cPrint This"))
    assert chars == [
        AnsiEscapeSequence("\x1b]0;Set The Terminal Title To This\u009c"),
        "P",
        "r",
        "i",
        "n",
        "t",
        " ",
        "T",
        "h",
        "i",
        "s",
    ]


def test_ansi_aware_round_trip_rebuilds_input():
    text = "\x1b[1mbold\x1b[0m and \x1b]2;title\x07plain"
    assert "".join(str(item) for item in ansi_aware_chars(text)) == text


def test_plain_text_is_unchanged():
    text = "no escapes here, 请输 ♥"
    assert strip_ansi(text) == text
    assert list(ansi_aware_chars(text)) == list(text)


def test_empty_input_yields_nothing():
    assert list(ansi_aware_chars("")) == []
    assert strip_ansi("") == ""