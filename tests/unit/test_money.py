"""Unit tests for decimal parsing and currency formatting"""

import pytest
from decimal import Decimal
from tier_statements.utils.money import format_amount, format_currency, parse_decimal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", Decimal("12.5")),
        (" -3.25 ", Decimal("-3.25")),
        ("0", Decimal("0")),
        ("+7", Decimal("7")),
        (".5", Decimal("0.5")),
        ("999999999999999.999999", Decimal("999999999999999.999999")),
    ],
)
def test_parse_decimal_valid(raw, expected):
    assert parse_decimal(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "abc",
        "NaN",
        "Infinity",
        "-inf",
        "12.5.1",
        "$12",
        "1e3",  # exponent notation
        "5E-2",
        "1_000",  # digit separators
        "1,000",
        "1000000000000000",  # 10^15
        "1234567890123456789012345678.5",
        "0.0000001",  # more than 6 decimal places
    ],
)
def test_parse_decimal_invalid(raw):
    assert parse_decimal(raw) is None


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("1124.3", "$1,124.30"),
        ("33.725", "$33.73"),  # half-up
        ("0", "$0.00"),
        ("-12.345", "-$12.35"),
        ("-0.001", "$0.00"),  # no negative zero
        ("1234567.891", "$1,234,567.89"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(Decimal(amount)) == expected


def test_format_currency_symbol():
    assert format_currency(Decimal("5"), symbol="€") == "€5.00"


def test_format_amount_plain():
    assert format_amount(Decimal("1124.3")) == "1124.30"
    assert format_amount(Decimal("-0.004")) == "0.00"
