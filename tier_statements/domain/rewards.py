"""Reward points engine - one purchase points rule per benefit tier"""

from decimal import Decimal
from typing import Callable, Dict
from tier_statements.domain.models import Cardholder, Tier

DIAMOND_DISCOUNT_RATE = Decimal("0.05")
DIAMOND_POINTS_PER_DOLLAR = 3

BLUE_DIAMOND_DISCOUNT_RATE = Decimal("0.10")
BLUE_DIAMOND_POINTS_PER_DOLLAR = 5
BLUE_DIAMOND_BONUS_THRESHOLD = Decimal("1000.00")
BLUE_DIAMOND_BONUS_POINTS = 100


def whole_dollars(amount: Decimal) -> int:
    """Truncate to whole dollars; zero and negative amounts score nothing"""
    if amount <= 0:
        return 0
    return int(amount)


def sapphire_points(total_purchases: Decimal) -> int:
    """1 point per whole dollar spent"""
    return whole_dollars(total_purchases)


def diamond_points(total_purchases: Decimal) -> int:
    """3 points per whole dollar after a 5% discount"""
    discounted = total_purchases * (1 - DIAMOND_DISCOUNT_RATE)
    return DIAMOND_POINTS_PER_DOLLAR * whole_dollars(discounted)


def blue_diamond_points(total_purchases: Decimal) -> int:
    """
    5 points per whole dollar after a 10% discount.

    Spending strictly above $1000.00 (before the discount) earns a flat
    100 point bonus on top.
    """
    discounted = total_purchases * (1 - BLUE_DIAMOND_DISCOUNT_RATE)
    points = BLUE_DIAMOND_POINTS_PER_DOLLAR * whole_dollars(discounted)

    if total_purchases > BLUE_DIAMOND_BONUS_THRESHOLD:
        points += BLUE_DIAMOND_BONUS_POINTS

    return points


POINTS_RULES: Dict[Tier, Callable[[Decimal], int]] = {
    Tier.SAPPHIRE: sapphire_points,
    Tier.DIAMOND: diamond_points,
    Tier.BLUE_DIAMOND: blue_diamond_points,
}


def calculate_purchase_points(cardholder: Cardholder) -> int:
    """Apply the cardholder's tier rule to their total purchases"""
    rule = POINTS_RULES[cardholder.tier]
    return rule(cardholder.total_purchases)
