"""Orderings over parsed cardholders - both stable, both non-destructive"""

from typing import Iterable, List, Optional
from tier_statements.domain.billing import calculate_current_balance
from tier_statements.domain.exceptions import CollectionNotBuiltError
from tier_statements.domain.models import Cardholder


def _require_cardholders(cardholders: Optional[Iterable[Cardholder]]) -> None:
    if cardholders is None:
        raise CollectionNotBuiltError("cannot sort before cardholders have been ingested")


def sort_by_name(cardholders: Iterable[Cardholder]) -> List[Cardholder]:
    """Ascending ordinal (case-sensitive) name order; equal names keep file order"""
    _require_cardholders(cardholders)
    return sorted(cardholders, key=lambda c: c.name)


def sort_by_balance(cardholders: Iterable[Cardholder]) -> List[Cardholder]:
    """
    Current balance, highest first.

    Negating the key instead of passing reverse=True keeps equal balances
    in their original relative order.
    """
    _require_cardholders(cardholders)
    return sorted(cardholders, key=lambda c: -calculate_current_balance(c))
