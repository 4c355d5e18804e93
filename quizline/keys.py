"""Key events delivered to prompts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional

__all__ = ["KeyModifiers", "KeyCode", "Key", "char_keys_from_str"]


class KeyModifiers(enum.Flag):
    """Modifier keys held down while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


class KeyCode(enum.Enum):
    """The key that was pressed."""

    ENTER = enum.auto()
    ESCAPE = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    CHAR = enum.auto()


@dataclass(frozen=True)
class Key:
    """A key press: the key, its modifiers and, for character keys, the character."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    character: Optional[str] = None

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if self.character is None or len(self.character) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.character is not None:
            raise ValueError(f"{self.code.name} keys carry no character")

    @staticmethod
    def char(c: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> "Key":
        """Build the key event for typing ``c``."""
        return Key(KeyCode.CHAR, modifiers, c)


def char_keys_from_str(text: str) -> List[Key]:
    """Return one unmodified character key per character of ``text``."""
    return [Key.char(c) for c in text]