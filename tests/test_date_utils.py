import datetime

import pytest

from quizline.date_utils import Month, get_current_date, get_month, get_start_date


def test_get_current_date():
    assert get_current_date() == datetime.date.today()


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (Month.JANUARY, 2021, datetime.date(2021, 1, 1)),
        (Month.FEBRUARY, 2021, datetime.date(2021, 2, 1)),
        (Month.MARCH, 2021, datetime.date(2021, 3, 1)),
        (Month.DECEMBER, 1883, datetime.date(1883, 12, 1)),
        (Month.JUNE, 3042, datetime.date(3042, 6, 1)),
    ],
)
def test_get_start_date(month, year, expected):
    assert get_start_date(month, year) == expected


@pytest.mark.parametrize(
    "number, expected",
    [
        (1, Month.JANUARY),
        (2, Month.FEBRUARY),
        (3, Month.MARCH),
        (4, Month.APRIL),
        (5, Month.MAY),
        (6, Month.JUNE),
        (7, Month.JULY),
        (8, Month.AUGUST),
        (9, Month.SEPTEMBER),
        (10, Month.OCTOBER),
        (11, Month.NOVEMBER),
        (12, Month.DECEMBER),
    ],
)
def test_get_month(number, expected):
    assert get_month(number) is expected


def test_get_month_0_raises():
    with pytest.raises(ValueError, match="Invalid month"):
        get_month(0)


def test_get_month_13_raises():
    with pytest.raises(ValueError, match="Invalid month"):
        get_month(13)