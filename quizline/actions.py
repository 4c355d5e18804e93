"""Top-level prompt actions derived from key presses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

from quizline.keys import Key, KeyCode, KeyModifiers

__all__ = ["ActionKind", "Action", "action_from_key"]


class ActionKind(enum.Enum):
    """Kinds of directives a prompt receives."""

    SUBMIT = enum.auto()
    CANCEL = enum.auto()
    INTERRUPT = enum.auto()
    INNER = enum.auto()


@dataclass(frozen=True)
class Action:
    """A directive for a prompt.

    ``inner`` holds the prompt-specific action when ``kind`` is ``INNER``.
    """

    kind: ActionKind
    inner: Any = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.INNER and self.inner is None:
            raise ValueError("an inner action needs a value")
        if self.kind is not ActionKind.INNER and self.inner is not None:
            raise ValueError(f"{self.kind.name} actions carry no inner value")


def _is_char(key: Key, chars: str, modifiers: KeyModifiers) -> bool:
    return (
        key.code is KeyCode.CHAR
        and key.modifiers == modifiers
        and key.character is not None
        and key.character in chars
    )


def action_from_key(key: Key, inner_from_key: Callable[[Key], Any]) -> Optional[Action]:
    """Map a key press to an action.

    Submit, cancel and interrupt keys are recognised here; every other key is
    handed to ``inner_from_key``, whose result (if not ``None``) becomes an
    inner action.
    """
    if (
        key.code is KeyCode.ENTER
        or _is_char(key, "\n", KeyModifiers.NONE)
        or _is_char(key, "j", KeyModifiers.CONTROL)
    ):
        return Action(ActionKind.SUBMIT)
    if key.code is KeyCode.ESCAPE or _is_char(key, "gd", KeyModifiers.CONTROL):
        return Action(ActionKind.CANCEL)
    if _is_char(key, "c", KeyModifiers.CONTROL):
        return Action(ActionKind.INTERRUPT)

    inner = inner_from_key(key)
    if inner is None:
        return None
    return Action(ActionKind.INNER, inner)