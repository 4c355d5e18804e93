"""Autocompletion support for text prompts.

An autocompleter receives the current text input and returns suggestions to
show the user. When the completion hotkey is pressed it is asked for a
replacement: a string that replaces the input, or ``None`` to leave it alone.
"""

from __future__ import annotations

import abc
from typing import Callable, List, Optional

__all__ = ["Replacement", "Autocomplete", "NoAutoCompletion", "FunctionAutocomplete"]

Replacement = Optional[str]


class Autocomplete(abc.ABC):
    """Source of suggestions and completions for a text input."""

    @abc.abstractmethod
    def get_suggestions(self, text: str) -> List[str]:
        """Return the suggestions to display for ``text``."""

    @abc.abstractmethod
    def get_completion(
        self, text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        """Return the text that should replace ``text``, or ``None``."""


class NoAutoCompletion(Autocomplete):
    """Autocompleter that never suggests or completes anything."""

    def get_suggestions(self, text: str) -> List[str]:
        return []

    def get_completion(
        self, text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        # Only a suggestion this completer offered may replace the input,
        # and it offers none.
        if highlighted_suggestion in self.get_suggestions(text):
            return highlighted_suggestion
        return None


class FunctionAutocomplete(Autocomplete):
    """Autocompleter built from a function that returns suggestions.

    Completion replaces the input with the highlighted suggestion, if any.
    """

    def __init__(self, suggester: Callable[[str], List[str]]) -> None:
        self.suggester = suggester

    def get_suggestions(self, text: str) -> List[str]:
        return list(self.suggester(text))

    def get_completion(
        self, text: str, highlighted_suggestion: Optional[str]
    ) -> Replacement:
        if highlighted_suggestion is None:
            return None
        return str(highlighted_suggestion)