import datetime

import pytest

from quizline.formatter import (
    default_bool_formatter,
    default_date_formatter,
    default_string_formatter,
)


@pytest.mark.parametrize("text", ["Times Square", "times sQuare", "", "请输入"])
def test_string_formatter_echoes_input(text):
    assert default_string_formatter(text) == text


def test_bool_formatter_true_is_yes():
    assert default_bool_formatter(True) == "Yes"


def test_bool_formatter_false_is_no():
    assert default_bool_formatter(False) == "No"


def test_date_formatter_documented_examples():
    assert default_date_formatter(datetime.date(2021, 7, 25)) == "July 25, 2021"
    assert default_date_formatter(datetime.date(2021, 1, 1)) == "January 1, 2021"


def test_date_formatter_day_has_no_padding():
    formatted = default_date_formatter(datetime.date(2021, 1, 5))
    assert " 5," in formatted
    assert "05" not in formatted


def test_date_formatter_ends_with_year():
    formatted = default_date_formatter(datetime.date(1883, 12, 1))
    assert formatted.endswith(", 1883")
    assert formatted.startswith("December ")