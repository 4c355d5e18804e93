"""Iteration over text that may contain ANSI escape sequences.

An escape sequence is recognised by a simplified version of the DEC ANSI
parser state machine. Only leaving and returning to the "ground" state is
tracked. A sequence must start with the escape character; single-byte
C1 introducers such as ``\\x9b`` are not recognised.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, Union

__all__ = [
    "AnsiEscapeSequence",
    "ansi_aware_chars",
    "ansi_stripped_chars",
    "strip_ansi",
]

_ESC = 0x1B


class _State(enum.Enum):
    ESCAPE = enum.auto()
    CSI_ENTRY = enum.auto()
    ESCAPE_INTERMEDIATE = enum.auto()
    STRING = enum.auto()


_STRING_INTRODUCERS = frozenset({0x5D, 0x50, 0x58, 0x5E, 0x5F})


def _is_escape_final(code: int) -> bool:
    return (
        0x30 <= code <= 0x4F
        or 0x51 <= code <= 0x57
        or code in (0x59, 0x5A, 0x5C)
        or 0x60 <= code <= 0x7E
    )


def _match_escape(text: str, start: int) -> Optional[int]:
    """Return the end index of an escape sequence starting at ``start``, if any."""
    if text[start] != "\x1b":
        return None

    length = len(text)
    state = _State.ESCAPE
    pos = start + 1

    while pos < length:
        code = ord(text[pos])
        pos += 1

        if state is _State.ESCAPE:
            if code == 0x5B:
                state = _State.CSI_ENTRY
            elif code in _STRING_INTRODUCERS:
                state = _State.STRING
            elif 0x20 <= code <= 0x2F:
                state = _State.ESCAPE_INTERMEDIATE
            elif _is_escape_final(code):
                return pos
            # anything else keeps us in the escape state
        elif code == _ESC:
            state = _State.ESCAPE
        elif state is _State.CSI_ENTRY:
            if 0x40 <= code <= 0x7E:
                return pos
        elif state is _State.ESCAPE_INTERMEDIATE:
            if 0x30 <= code <= 0x7E:
                return pos
        elif code in (0x07, 0x9C):
            return pos

    return length


@dataclass(frozen=True)
class AnsiEscapeSequence:
    """A complete ANSI escape sequence found in a string."""

    text: str

    def __str__(self) -> str:
        return self.text


def ansi_aware_chars(text: str) -> Iterator[Union[str, AnsiEscapeSequence]]:
    """Yield the characters of ``text``, grouping escape sequences into one item."""
    pos = 0
    length = len(text)
    while pos < length:
        end = _match_escape(text, pos)
        if end is None:
            yield text[pos]
            pos += 1
        else:
            yield AnsiEscapeSequence(text[pos:end])
            pos = end


def ansi_stripped_chars(text: str) -> Iterator[str]:
    """Yield the characters of ``text`` with escape sequences left out."""
    for item in ansi_aware_chars(text):
        if isinstance(item, str):
            yield item


def strip_ansi(text: str) -> str:
    """Return ``text`` without any ANSI escape sequences."""
    return "".join(ansi_stripped_chars(text))