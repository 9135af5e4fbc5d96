"""Monthly statement assembly - main entry point for per-cardholder figures"""

from tier_statements.domain.billing import (
    calculate_current_balance,
    calculate_interest,
    calculate_minimum_payment,
)
from tier_statements.domain.models import Cardholder, Statement
from tier_statements.domain.rewards import calculate_purchase_points


def build_statement(cardholder: Cardholder) -> Statement:
    """
    Compute every derived figure for one cardholder.

    Returns a Statement so formatting reads finished values instead of
    recomputing them.
    """
    current_balance = calculate_current_balance(cardholder)

    return Statement(
        cardholder=cardholder,
        total_purchases=cardholder.total_purchases,
        interest=calculate_interest(cardholder),
        current_balance=current_balance,
        minimum_payment=calculate_minimum_payment(current_balance),
        purchase_points=calculate_purchase_points(cardholder),
    )
