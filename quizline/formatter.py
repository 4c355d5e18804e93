"""Default formatters that turn a submitted answer into display text.

A formatter takes the answer a prompt produced and returns the string shown
to the user as the final answer.
"""

from __future__ import annotations

import datetime
from typing import Any

__all__ = [
    "default_string_formatter",
    "default_bool_formatter",
    "default_date_formatter",
]

_BOOL_LABELS = {True: "Yes", False: "No"}


def default_string_formatter(value: Any) -> str:
    """Echo the input back as a string."""
    return str(value)


def default_bool_formatter(answer: bool) -> str:
    """Show ``True`` as ``"Yes"`` and ``False`` as ``"No"``."""
    return _BOOL_LABELS[bool(answer)]


def default_date_formatter(value: datetime.date) -> str:
    """Show a date as ``Month Day, Year``, e.g. ``July 25, 2021``."""
    return f"{value:%B} {value.day}, {value.year:04d}"