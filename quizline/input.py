"""Single-line text input with a grapheme-aware cursor."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional

import regex

from quizline.keys import Key, KeyCode, KeyModifiers

__all__ = [
    "Magnitude",
    "LineDirection",
    "InputActionKind",
    "InputAction",
    "InputActionResult",
    "Input",
    "input_action_from_key",
]

_GRAPHEME = regex.compile(r"\X")
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}]")


class Magnitude(enum.Enum):
    """How far an action reaches."""

    CHAR = enum.auto()
    WORD = enum.auto()
    LINE = enum.auto()


class LineDirection(enum.Enum):
    """Direction of an action along the line."""

    LEFT = enum.auto()
    RIGHT = enum.auto()


class InputActionKind(enum.Enum):
    """Kinds of edits on a text input."""

    DELETE = enum.auto()
    MOVE_CURSOR = enum.auto()
    WRITE = enum.auto()


@dataclass(frozen=True)
class InputAction:
    """An edit to apply to an :class:`Input`."""

    kind: InputActionKind
    magnitude: Optional[Magnitude] = None
    direction: Optional[LineDirection] = None
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is InputActionKind.WRITE:
            if self.char is None or len(self.char) != 1:
                raise ValueError("a write action needs exactly one character")
        elif self.magnitude is None or self.direction is None:
            raise ValueError(f"{self.kind.name} needs a magnitude and a direction")


class InputActionResult(enum.Enum):
    """What an action changed."""

    CONTENT_CHANGED = enum.auto()
    POSITION_CHANGED = enum.auto()
    CLEAN = enum.auto()

    def needs_redraw(self) -> bool:
        """Whether the input must be drawn again."""
        return self is not InputActionResult.CLEAN


def _graphemes(text: str) -> List[str]:
    return _GRAPHEME.findall(text)


def _is_alphanumeric(grapheme: str) -> bool:
    return _WORD_CHAR.search(grapheme) is not None


def input_action_from_key(key: Key) -> Optional[InputAction]:
    """Map a key press to a text input action, or ``None`` if it has none."""
    ctrl = KeyModifiers.CONTROL in key.modifiers
    code = key.code

    def delete(mag: Magnitude, direction: LineDirection) -> InputAction:
        return InputAction(InputActionKind.DELETE, mag, direction)

    def move(mag: Magnitude, direction: LineDirection) -> InputAction:
        return InputAction(InputActionKind.MOVE_CURSOR, mag, direction)

    if code is KeyCode.BACKSPACE:
        return delete(Magnitude.CHAR, LineDirection.LEFT)
    if code is KeyCode.CHAR:
        # Ctrl+H is what many terminals send for Ctrl+Backspace: ignore it
        # rather than writing an "h".
        if key.character == "h" and ctrl:
            return None
        return InputAction(InputActionKind.WRITE, char=key.character)
    if code is KeyCode.DELETE:
        return delete(Magnitude.WORD if ctrl else Magnitude.CHAR, LineDirection.RIGHT)
    if code is KeyCode.HOME:
        return move(Magnitude.LINE, LineDirection.LEFT)
    if code is KeyCode.END:
        return move(Magnitude.LINE, LineDirection.RIGHT)
    if code is KeyCode.LEFT:
        return move(Magnitude.WORD if ctrl else Magnitude.CHAR, LineDirection.LEFT)
    if code is KeyCode.RIGHT:
        return move(Magnitude.WORD if ctrl else Magnitude.CHAR, LineDirection.RIGHT)
    return None


class Input:
    """Editable text with a cursor measured in grapheme clusters."""

    def __init__(self, content: str = "", placeholder: Optional[str] = None) -> None:
        self._content = content
        self._placeholder = placeholder
        self._length = len(_graphemes(content))
        self._cursor = self._length

    def with_cursor(self, cursor: int) -> "Input":
        """Place the cursor at grapheme index ``cursor`` and return the input."""
        if not 0 <= cursor <= self._length:
            raise ValueError(
                f"cursor index {cursor} should be less than or equal to "
                f"content length {self._length}"
            )
        self._cursor = cursor
        return self

    def with_placeholder(self, placeholder: str) -> "Input":
        """Set the placeholder text and return the input."""
        self._placeholder = placeholder
        return self

    @property
    def content(self) -> str:
        return self._content

    @property
    def placeholder(self) -> Optional[str]:
        return self._placeholder

    @property
    def length(self) -> int:
        """Number of grapheme clusters in the content."""
        return self._length

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return self._length == 0

    @property
    def pre_cursor(self) -> str:
        """The content to the left of the cursor."""
        if self._cursor == self._length:
            return self._content
        return "".join(_graphemes(self._content)[: self._cursor])

    def clear(self) -> None:
        """Remove all content; the placeholder is kept."""
        self._content = ""
        self._cursor = 0
        self._length = 0

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply ``action`` and report what changed."""
        left = action.direction is LineDirection.LEFT
        if action.kind is InputActionKind.MOVE_CURSOR:
            return self._move_left(action.magnitude) if left else self._move_right(action.magnitude)
        if action.kind is InputActionKind.DELETE:
            if left:
                return self._backwards_delete(action.magnitude)
            return self._forwards_delete(action.magnitude)
        return self._insert(action.char)

    def _move_left(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN
        if mag is Magnitude.CHAR:
            self._cursor -= 1
        elif mag is Magnitude.WORD:
            self._cursor = self._prev_word_index()
        else:
            self._cursor = 0
        return InputActionResult.POSITION_CHANGED

    def _move_right(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == self._length:
            return InputActionResult.CLEAN
        if self._cursor > self._length:
            self._cursor = self._length
            return InputActionResult.POSITION_CHANGED
        if mag is Magnitude.CHAR:
            self._cursor += 1
        elif mag is Magnitude.WORD:
            self._cursor = self._next_word_index()
        else:
            self._cursor = self._length
        return InputActionResult.POSITION_CHANGED

    def _next_word_index(self) -> int:
        graphemes = _graphemes(self._content)
        seen_word = False
        for idx, grapheme in enumerate(graphemes[self._cursor :], start=self._cursor):
            if _is_alphanumeric(grapheme):
                seen_word = True
            elif seen_word:
                return idx
        return self._length

    def _prev_word_index(self) -> int:
        graphemes = _graphemes(self._content)[: self._cursor]
        seen_word = False
        for idx, grapheme in reversed(list(enumerate(graphemes))):
            if _is_alphanumeric(grapheme):
                seen_word = True
            elif seen_word:
                return idx + 1
        return 0

    def _insert(self, c: str) -> InputActionResult:
        if self._cursor >= self._length:
            self._content += c
        else:
            graphemes = _graphemes(self._content)
            self._content = (
                "".join(graphemes[: self._cursor]) + c + "".join(graphemes[self._cursor :])
            )
        if self._update_length():
            self._cursor += 1
        return InputActionResult.CONTENT_CHANGED

    def _backwards_delete(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN

        current = self._cursor
        if mag is Magnitude.CHAR:
            new = current - 1
        elif mag is Magnitude.WORD:
            new = self._prev_word_index()
        else:
            new = 0

        if new == current:
            return InputActionResult.CLEAN

        self._cursor = new
        return self._delete_chars_at_right(current - new)

    def _forwards_delete(self, mag: Magnitude) -> InputActionResult:
        start = self._cursor
        if mag is Magnitude.CHAR:
            end = start + 1
        elif mag is Magnitude.WORD:
            end = self._next_word_index()
        else:
            end = self._length
        return self._delete_chars_at_right(end - start)

    def _delete_chars_at_right(self, qty: int) -> InputActionResult:
        start = self._cursor
        end = start + qty
        graphemes = _graphemes(self._content)
        kept = graphemes[:start] + graphemes[end:]
        removed = len(kept) != len(graphemes)
        self._content = "".join(kept)
        self._length = len(kept)
        return InputActionResult.CONTENT_CHANGED if removed else InputActionResult.CLEAN

    def _update_length(self) -> bool:
        new_length = len(_graphemes(self._content))
        changed = new_length != self._length
        self._length = new_length
        return changed