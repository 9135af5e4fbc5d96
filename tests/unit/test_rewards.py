"""Unit tests for per-tier purchase points rules"""

import pytest
from decimal import Decimal
from tier_statements.domain.models import Tier
from tier_statements.domain.rewards import (
    POINTS_RULES,
    blue_diamond_points,
    calculate_purchase_points,
    diamond_points,
    sapphire_points,
)


def test_every_tier_has_a_points_rule():
    """Test the rule table covers the whole tier enum"""
    assert set(POINTS_RULES) == set(Tier)


@pytest.mark.parametrize(
    "total, expected",
    [("114.3", 114), ("0.99", 0), ("1000", 1000), ("0", 0)],
)
def test_sapphire_points_whole_dollars(total, expected):
    """Test 1 point per whole dollar, truncated"""
    assert sapphire_points(Decimal(total)) == expected


def test_diamond_points_discount_then_triple():
    """Test 5% discount before 3 points per whole dollar"""
    assert diamond_points(Decimal("100")) == 285  # 95 * 3
    assert diamond_points(Decimal("10.99")) == 30  # 10.4405 → 10 * 3


def test_blue_diamond_points_discount_then_quintuple():
    """Test 10% discount before 5 points per whole dollar"""
    assert blue_diamond_points(Decimal("100")) == 450  # 90 * 5
    assert blue_diamond_points(Decimal("1250.50")) == 5725  # 1125 * 5 + 100 bonus


def test_blue_diamond_bonus_threshold_is_exclusive():
    """Test the bonus applies only above $1000.00"""
    assert blue_diamond_points(Decimal("1000.00")) == 4500  # 900 * 5, no bonus
    assert blue_diamond_points(Decimal("1000.01")) == 4600  # 900.009 → 900 * 5 + 100


@pytest.mark.parametrize("rule", [sapphire_points, diamond_points, blue_diamond_points])
def test_points_never_negative(rule):
    """Test refunds exceeding purchases earn nothing rather than negative points"""
    assert rule(Decimal("-250.00")) == 0


@pytest.mark.parametrize(
    "total",
    ["1.12", "2", "19.99", "114.3", "999.99", "1000.01", "5000"],
)
def test_higher_tiers_earn_more(total):
    """Test Diamond and Blue Diamond beat Sapphire for the same spend"""
    amount = Decimal(total)
    sapphire = sapphire_points(amount)

    assert diamond_points(amount) > sapphire
    assert blue_diamond_points(amount) > sapphire


def test_calculate_purchase_points_dispatches_on_tier(make_cardholder):
    """Test the cardholder's tier selects the rule"""
    purchases = ("60.00", "40.00")

    assert calculate_purchase_points(make_cardholder(tier=Tier.SAPPHIRE, purchases=purchases)) == 100
    assert calculate_purchase_points(make_cardholder(tier=Tier.DIAMOND, purchases=purchases)) == 285
    assert calculate_purchase_points(make_cardholder(tier=Tier.BLUE_DIAMOND, purchases=purchases)) == 450


def test_calculate_purchase_points_no_purchases(make_cardholder):
    """Test an account without purchases earns no points in any tier"""
    for tier in Tier:
        assert calculate_purchase_points(make_cardholder(tier=tier)) == 0
