"""Prompt that parses text input into a value of any type."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar

from quizline.errors import CustomUserError
from quizline.input import Input, InputAction, InputActionResult, input_action_from_key
from quizline.keys import Key

__all__ = [
    "CustomTypePromptAction",
    "CustomType",
    "CustomTypePrompt",
    "custom_type_action_from_key",
]

T = TypeVar("T")

Validator = Callable[[T], Optional[str]]
"""A validator returns ``None`` for a valid value or an error message otherwise."""


@dataclass(frozen=True)
class CustomTypePromptAction:
    """An edit of the prompt's text input."""

    input_action: InputAction


def custom_type_action_from_key(key: Key) -> Optional[CustomTypePromptAction]:
    """Map a key press to a prompt action, or ``None`` if it has none."""
    action = input_action_from_key(key)
    if action is None:
        return None
    return CustomTypePromptAction(action)


@dataclass(frozen=True)
class CustomType(Generic[T]):
    """Configuration of a prompt whose answer is parsed from text.

    ``parser`` turns the text into a value and raises ``ValueError`` when it
    cannot. Validators run in order; the first error message is shown.
    """

    message: str
    parser: Callable[[str], T] = str
    formatter: Callable[[T], str] = str
    default_value_formatter: Callable[[T], str] = str
    starting_input: Optional[str] = None
    default: Optional[T] = None
    placeholder: Optional[str] = None
    help_message: Optional[str] = None
    validators: Tuple[Validator, ...] = ()
    error_message: str = "Invalid input"

    def with_starting_input(self, text: str) -> "CustomType[T]":
        """Set the initial text of the input."""
        return dataclasses.replace(self, starting_input=text)

    def with_default(self, default: T) -> "CustomType[T]":
        """Set the value returned when the input is empty."""
        return dataclasses.replace(self, default=default)

    def with_placeholder(self, placeholder: str) -> "CustomType[T]":
        return dataclasses.replace(self, placeholder=placeholder)

    def with_help_message(self, message: str) -> "CustomType[T]":
        return dataclasses.replace(self, help_message=message)

    def with_formatter(self, formatter: Callable[[T], str]) -> "CustomType[T]":
        return dataclasses.replace(self, formatter=formatter)

    def with_default_value_formatter(
        self, formatter: Callable[[T], str]
    ) -> "CustomType[T]":
        return dataclasses.replace(self, default_value_formatter=formatter)

    def with_parser(self, parser: Callable[[str], T]) -> "CustomType[T]":
        return dataclasses.replace(self, parser=parser)

    def with_validator(self, validator: Validator) -> "CustomType[T]":
        """Append a validator."""
        return dataclasses.replace(self, validators=self.validators + (validator,))

    def with_validators(self, validators: Iterable[Validator]) -> "CustomType[T]":
        """Append validators in the order given."""
        return dataclasses.replace(
            self, validators=self.validators + tuple(validators)
        )

    def with_error_message(self, error_message: str) -> "CustomType[T]":
        """Set the message shown when the input cannot be parsed."""
        return dataclasses.replace(self, error_message=error_message)

    def start(self) -> "CustomTypePrompt[T]":
        """Create the running prompt state for this configuration."""
        return CustomTypePrompt(self)


class CustomTypePrompt(Generic[T]):
    """State of a running custom-type prompt."""

    def __init__(self, config: CustomType[T]) -> None:
        self.config = config
        self.message = config.message
        self.help_message = config.help_message
        self.error: Optional[str] = None
        self.input = Input(config.starting_input or "", config.placeholder)

    def handle(self, action: CustomTypePromptAction) -> InputActionResult:
        """Apply an edit to the text input."""
        return self.input.handle(action.input_action)

    def _validate(self, value: T) -> Optional[str]:
        for validator in self.config.validators:
            try:
                message = validator(value)
            except Exception as exc:
                raise CustomUserError(exc) from exc
            if message is not None:
                return message
        return None

    def _final_answer(self) -> T:
        if self.config.default is not None and not self.input.content:
            return self.config.default
        return self.config.parser(self.input.content)

    def submit(self) -> Optional[T]:
        """Return the answer, or ``None`` after recording an error message.

        Raises :class:`CustomUserError` if a validator fails with an exception.
        """
        try:
            answer = self._final_answer()
        except ValueError:
            self.error = self.config.error_message
            return None

        message = self._validate(answer)
        if message is not None:
            self.error = message
            return None
        return answer

    def format_answer(self, answer: T) -> str:
        """Text shown for the submitted answer."""
        return self.config.formatter(answer)

    def default_message(self) -> Optional[str]:
        """Text shown for the default value, if there is one."""
        if self.config.default is None:
            return None
        return self.config.default_value_formatter(self.config.default)