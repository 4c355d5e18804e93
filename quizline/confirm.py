"""Yes/no confirmation prompt built on the custom-type prompt."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Optional

from quizline.custom_type import CustomType, CustomTypePrompt
from quizline.formatter import default_bool_formatter
from quizline.parser import default_bool_parser

__all__ = ["Confirm", "default_value_formatter"]

_DEFAULT_VALUE_LABELS = {True: "Y/n", False: "y/N"}


def default_value_formatter(answer: bool) -> str:
    """Show a default of ``True`` as ``"Y/n"`` and ``False`` as ``"y/N"``."""
    return _DEFAULT_VALUE_LABELS[bool(answer)]


_DEFAULT_VALUE_FORMATTER = default_value_formatter


@dataclass(frozen=True)
class Confirm:
    """Configuration of a yes/no question.

    The input is parsed to ``True`` or ``False`` by ``parser``, which raises
    ``ValueError`` for text it does not accept. Confirm prompts take no
    validators.
    """

    DEFAULT_ERROR_MESSAGE = "Invalid answer, try typing 'y' for yes or 'n' for no"

    message: str
    starting_input: Optional[str] = None
    default: Optional[bool] = None
    placeholder: Optional[str] = None
    help_message: Optional[str] = None
    formatter: Callable[[bool], str] = default_bool_formatter
    parser: Callable[[str], bool] = default_bool_parser
    default_value_formatter: Callable[[bool], str] = _DEFAULT_VALUE_FORMATTER
    error_message: str = DEFAULT_ERROR_MESSAGE

    def with_starting_input(self, text: str) -> "Confirm":
        """Set the initial text of the input."""
        return dataclasses.replace(self, starting_input=text)

    def with_default(self, default: bool) -> "Confirm":
        """Set the answer returned when the input is empty."""
        return dataclasses.replace(self, default=default)

    def with_placeholder(self, placeholder: str) -> "Confirm":
        return dataclasses.replace(self, placeholder=placeholder)

    def with_help_message(self, message: str) -> "Confirm":
        return dataclasses.replace(self, help_message=message)

    def with_formatter(self, formatter: Callable[[bool], str]) -> "Confirm":
        return dataclasses.replace(self, formatter=formatter)

    def with_parser(self, parser: Callable[[str], bool]) -> "Confirm":
        return dataclasses.replace(self, parser=parser)

    def with_error_message(self, error_message: str) -> "Confirm":
        """Set the message shown when the input cannot be parsed."""
        return dataclasses.replace(self, error_message=error_message)

    def with_default_value_formatter(
        self, formatter: Callable[[bool], str]
    ) -> "Confirm":
        return dataclasses.replace(self, default_value_formatter=formatter)

    def to_custom_type(self) -> CustomType[bool]:
        """The equivalent custom-type prompt configuration."""
        return CustomType(
            message=self.message,
            parser=self.parser,
            formatter=self.formatter,
            default_value_formatter=self.default_value_formatter,
            starting_input=self.starting_input,
            default=self.default,
            placeholder=self.placeholder,
            help_message=self.help_message,
            validators=(),
            error_message=self.error_message,
        )

    def start(self) -> CustomTypePrompt[bool]:
        """Create the running prompt state for this question."""
        return self.to_custom_type().start()