"""Calendar helpers for date prompts."""

from __future__ import annotations

import datetime
import enum

__all__ = ["Month", "get_current_date", "get_start_date", "get_month"]


class Month(enum.IntEnum):
    """Months of the year, numbered from 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


def get_current_date() -> datetime.date:
    """Return today's date in local time."""
    return datetime.date.today()


def get_start_date(month: Month, year: int) -> datetime.date:
    """Return the first day of ``month`` in ``year``."""
    return datetime.date(year, int(month), 1)


def get_month(month: int) -> Month:
    """Return the month numbered ``month`` (1 to 12)."""
    try:
        return Month(month)
    except ValueError:
        raise ValueError("Invalid month") from None