"""Exceptions raised by prompts."""

from __future__ import annotations

import errno

__all__ = [
    "InquireError",
    "NotTTYError",
    "InvalidConfigurationError",
    "InquireIOError",
    "OperationCanceledError",
    "OperationInterruptedError",
    "CustomUserError",
    "from_os_error",
]

_NOT_TTY_ERRNOS = frozenset({errno.ENOTTY, errno.ENXIO})


class InquireError(Exception):
    """Base class of every error a prompt raises."""


class NotTTYError(InquireError):
    """The input device is not a TTY, so raw mode cannot be enabled."""

    def __init__(self) -> None:
        super().__init__("The input device is not a TTY")


class InvalidConfigurationError(InquireError):
    """The prompt configuration is not valid."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"The prompt configuration is invalid: {detail}")


class InquireIOError(InquireError):
    """An input/output operation failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"IO error: {error}")
        self.__cause__ = error


class OperationCanceledError(InquireError):
    """The user canceled the prompt, e.g. by pressing ESC."""

    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(InquireError):
    """The user interrupted the prompt with Ctrl+C."""

    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class CustomUserError(InquireError):
    """Wraps an error raised by user-provided code such as a validator."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"User-provided error: {error}")
        self.__cause__ = error


def from_os_error(err: OSError) -> InquireError:
    """Convert an ``OSError`` into the matching prompt error."""
    if err.errno in _NOT_TTY_ERRNOS:
        return NotTTYError()
    return InquireIOError(err)