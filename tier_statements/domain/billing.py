"""Interest, balance and minimum payment rules shared by every tier"""

from decimal import Decimal, ROUND_HALF_UP
from tier_statements.domain.models import Cardholder

INTEREST_RATE = Decimal("0.01")

MINIMUM_PAYMENT_RATE = Decimal("0.03")
MINIMUM_PAYMENT_FLOOR = Decimal("20.00")

CENTS = Decimal("0.01")


def calculate_interest(cardholder: Cardholder) -> Decimal:
    """Interest on the carried balance: (previous balance - payment) * 1%"""
    return (cardholder.previous_balance - cardholder.payment) * INTEREST_RATE


def calculate_current_balance(cardholder: Cardholder) -> Decimal:
    """
    Closing balance for the cycle.

    current = previous - payment + interest + total purchases

    No rounding is applied here so the identity holds exactly; rounding to
    cents happens only when a value is displayed.
    """
    return (
        cardholder.previous_balance
        - cardholder.payment
        + calculate_interest(cardholder)
        + cardholder.total_purchases
    )


def calculate_minimum_payment(current_balance: Decimal) -> Decimal:
    """
    Minimum amount due for a closing balance.

    Policy:
    - Nothing is due on a zero or credit balance
    - 3% of the balance, rounded half-up to cents
    - Never less than $20.00, unless the balance itself is smaller

    Example:
        $1124.30 → 3% = $33.729 → $33.73
        $150.00  → 3% = $4.50, floored → $20.00
        $12.50   → floor exceeds balance → $12.50
    """
    if current_balance <= 0:
        return Decimal("0.00")

    balance_cents = current_balance.quantize(CENTS, rounding=ROUND_HALF_UP)
    percentage = (current_balance * MINIMUM_PAYMENT_RATE).quantize(CENTS, rounding=ROUND_HALF_UP)

    return min(max(percentage, MINIMUM_PAYMENT_FLOOR), balance_cents)
