"""Tests for amount and date formatting."""

from datetime import date, datetime

import pytest

from ledgerbook.rendering.formatting import (
    format_amount,
    format_currency,
    format_date,
    format_period_bound,
    format_signed_currency,
    format_time,
)
from ledgerbook.utils.amount_parser import parse_amount


def test_format_amount():
    assert format_amount(1234567.5) == "1,234,567.50"
    assert format_amount(0) == "0.00"


def test_format_currency():
    assert format_currency(1200) == "$1,200.00"
    assert format_currency(-15.5) == "-$15.50"
    assert format_currency(-0.001) == "$0.00"


def test_format_signed_currency_uses_magnitude():
    assert format_signed_currency(-60.0, "+") == "+$60.00"
    assert format_signed_currency(60.0, "-") == "-$60.00"


def test_format_date_and_time():
    value = datetime(2025, 1, 5, 14, 7)

    assert format_date(value) == "Jan 05, 2025"
    assert format_time(value) == "2:07 PM"
    assert format_time(datetime(2025, 1, 5, 0, 30)) == "12:30 AM"
    assert format_date(None) == ""
    assert format_time(None) == ""


def test_format_period_bound():
    assert format_period_bound(None) == "Forever"
    assert format_period_bound(date(2025, 12, 31)) == "Dec 31, 2025"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", 123.45),
        ("$1,234.56", 1234.56),
        ("-$12", -12.0),
        ("(300)", -300.0),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_parse_amount_invalid():
    with pytest.raises(ValueError):
        parse_amount("twelve")
    with pytest.raises(ValueError, match="Empty"):
        parse_amount("  ")
