"""Plain-text statement and report rendering"""

from typing import Dict, Iterable, List
from tier_statements.domain.exceptions import CollectionNotBuiltError
from tier_statements.domain.models import Cardholder, CardholderCollection, InvalidRecord, Statement
from tier_statements.domain.sorting import sort_by_balance, sort_by_name
from tier_statements.domain.statements import build_statement
from tier_statements.infrastructure.observability.metrics import record_report
from tier_statements.utils.money import format_currency

ORIGINAL_ORDER_TITLE = "Cardholders (file order)"
NAME_ORDER_TITLE = "Cardholders by name"
BALANCE_ORDER_TITLE = "Cardholders by current balance"
INVALID_RECORDS_TITLE = "Invalid records"

NO_CARDHOLDERS = "No cardholder records."
NO_INVALID_RECORDS = "No invalid records."

LABEL_WIDTH = 18


def _require_collection(collection: CardholderCollection) -> None:
    if not isinstance(collection, CardholderCollection):
        raise CollectionNotBuiltError(
            f"expected an ingested CardholderCollection, got {type(collection).__name__}"
        )


def _line(label: str, value: str) -> str:
    return f"  {label + ':':<{LABEL_WIDTH}}{value}"


def format_statement(statement: Statement, currency_symbol: str = "$") -> str:
    """
    Render one cardholder block.

    Example:
        Sapphire Cardholder
        Account 10001: Smith, Pat
          Previous balance: $1,200.00
          ...
    """
    cardholder = statement.cardholder

    def money(amount):
        return format_currency(amount, currency_symbol)

    lines = [
        f"{cardholder.tier.label} Cardholder",
        f"Account {cardholder.account_number}: {cardholder.name}",
        _line("Previous balance", money(cardholder.previous_balance)),
        _line("Payment", money(cardholder.payment)),
        _line("Interest", money(statement.interest)),
        _line("Current balance", money(statement.current_balance)),
        _line("Minimum payment", money(statement.minimum_payment)),
        _line("Purchase points", f"{statement.purchase_points:,}"),
    ]
    return "\n".join(lines)


def format_invalid_record(invalid_record: InvalidRecord) -> str:
    return f"Line {invalid_record.line_number}: {invalid_record.line}\n  Reason: {invalid_record.reason}"


def _render(title: str, blocks: List[str], empty_message: str) -> str:
    body = "\n\n".join(blocks) if blocks else empty_message
    return f"{title}\n\n{body}"


def _cardholder_report(title: str, cardholders: Iterable[Cardholder], currency_symbol: str) -> str:
    blocks = [format_statement(build_statement(c), currency_symbol) for c in cardholders]
    return _render(title, blocks, NO_CARDHOLDERS)


def original_order_report(collection: CardholderCollection, currency_symbol: str = "$") -> str:
    """Every cardholder block in file order"""
    _require_collection(collection)
    record_report("original")
    return _cardholder_report(ORIGINAL_ORDER_TITLE, collection.cardholders, currency_symbol)


def name_order_report(collection: CardholderCollection, currency_symbol: str = "$") -> str:
    """Every cardholder block, names ascending"""
    _require_collection(collection)
    record_report("by_name")
    return _cardholder_report(NAME_ORDER_TITLE, sort_by_name(collection.cardholders), currency_symbol)


def balance_order_report(collection: CardholderCollection, currency_symbol: str = "$") -> str:
    """Every cardholder block, current balance descending"""
    _require_collection(collection)
    record_report("by_balance")
    return _cardholder_report(BALANCE_ORDER_TITLE, sort_by_balance(collection.cardholders), currency_symbol)


def invalid_records_report(collection: CardholderCollection) -> str:
    """Every rejected line with its reason, in file order"""
    _require_collection(collection)
    record_report("invalid")
    blocks = [format_invalid_record(r) for r in collection.invalid_records]
    return _render(INVALID_RECORDS_TITLE, blocks, NO_INVALID_RECORDS)


def render_all_reports(collection: CardholderCollection, currency_symbol: str = "$") -> Dict[str, str]:
    """All four reports keyed original, by_name, by_balance, invalid"""
    return {
        "original": original_order_report(collection, currency_symbol),
        "by_name": name_order_report(collection, currency_symbol),
        "by_balance": balance_order_report(collection, currency_symbol),
        "invalid": invalid_records_report(collection),
    }
