"""Decimal parsing and currency formatting utilities"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENTS = Decimal("0.01")

# Plain point notation only: no exponents, underscores or grouping
DECIMAL_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")

# Keeps balance, interest and minimum payment arithmetic exact inside the
# 28-digit default decimal context
MAX_INTEGER_DIGITS = 15
MAX_FRACTION_DIGITS = 6


def parse_decimal(raw: str) -> Optional[Decimal]:
    """
    Parse a decimal in standard point notation, or None if it is not one.

    Values of 10^15 or more, or with more than 6 decimal places, are
    rejected as well.
    """
    text = raw.strip()
    if not DECIMAL_PATTERN.match(text):
        return None

    value = Decimal(text)
    if value and value.adjusted() >= MAX_INTEGER_DIGITS:
        return None
    if -value.as_tuple().exponent > MAX_FRACTION_DIGITS:
        return None
    return value


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to cents, folding -0.00 into 0.00"""
    rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return abs(rounded) if rounded == 0 else rounded


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Render as e.g. $1,124.30 or -$12.34"""
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_amount(amount: Decimal) -> str:
    """Plain two-decimal string without symbol or grouping, e.g. 1124.30"""
    return f"{round_cents(amount):.2f}"
