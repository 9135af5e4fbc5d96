"""Record parser - turns raw semicolon-delimited lines into cardholders"""

import time
from decimal import Decimal
from typing import Iterable, List, Sequence, Union
from tier_statements.domain.models import Cardholder, CardholderCollection, InvalidRecord, Tier
from tier_statements.domain.exceptions import (
    FieldParseError,
    InvalidCategoryError,
    RecordParseError,
    StructuralError,
)
from tier_statements.infrastructure.observability.logging import log_ingestion_summary, log_rejected_record
from tier_statements.infrastructure.observability.metrics import record_cardholder, record_rejection
from tier_statements.utils.money import parse_decimal

FIELD_DELIMITER = ";"
MIN_FIELDS = 5  # category, account, name, previous balance, payment
FIRST_PURCHASE_INDEX = 5

ParseResult = Union[Cardholder, InvalidRecord]


def _parse_tier(raw: str) -> Tier:
    category = raw.strip()
    tier = Tier.from_code(category)
    if tier is None:
        raise InvalidCategoryError(category)
    return tier


def _parse_amount(raw: str, field_name: str) -> Decimal:
    value = parse_decimal(raw)
    if value is None:
        raise FieldParseError(field_name, raw.strip())
    return value


def _split_fields(line: str) -> List[str]:
    fields = line.split(FIELD_DELIMITER)

    if len(fields) < MIN_FIELDS:
        raise StructuralError(f"expected at least {MIN_FIELDS} fields, found {len(fields)}")
    if not fields[1].strip():
        raise StructuralError("missing account number")
    if not fields[2].strip():
        raise StructuralError("missing cardholder name")

    return fields


def _build_cardholder(fields: Sequence[str]) -> Cardholder:
    tier = _parse_tier(fields[0])
    previous_balance = _parse_amount(fields[3], "previous balance")
    payment = _parse_amount(fields[4], "payment")
    purchases = tuple(
        _parse_amount(raw, f"purchase {position}")
        for position, raw in enumerate(fields[FIRST_PURCHASE_INDEX:], start=1)
    )

    return Cardholder(
        tier=tier,
        account_number=fields[1],
        name=fields[2],
        previous_balance=previous_balance,
        payment=payment,
        purchases=purchases,
    )


def parse_record(line: str, line_number: int = 1) -> ParseResult:
    """
    Parse one input line.

    Format: category;account;name;previous_balance;payment[;purchase...]

    Checks run structural → category → numeric and the first failure wins.
    Never raises for bad data: failures come back as an InvalidRecord that
    carries the raw line and a readable reason.
    """
    raw_line = line.rstrip("\r\n")

    try:
        return _build_cardholder(_split_fields(raw_line))
    except RecordParseError as e:
        return InvalidRecord(line=raw_line, reason=str(e), kind=e.kind, line_number=line_number)


def ingest_lines(lines: Iterable[str]) -> CardholderCollection:
    """
    Main entry point: parse every line into a CardholderCollection.

    Blank lines are skipped but still counted for line numbers. Every other
    line ends up in exactly one of the two sequences, in file order.
    """
    start_time = time.perf_counter()
    cardholders: List[Cardholder] = []
    invalid_records: List[InvalidRecord] = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        result = parse_record(line, line_number)

        if isinstance(result, InvalidRecord):
            invalid_records.append(result)
            record_rejection(result)
            log_rejected_record(result.line_number, result.kind.value, result.reason)
        else:
            cardholders.append(result)
            record_cardholder(result)

    duration_ms = (time.perf_counter() - start_time) * 1000
    log_ingestion_summary(len(cardholders), len(invalid_records), duration_ms)

    return CardholderCollection(
        cardholders=tuple(cardholders),
        invalid_records=tuple(invalid_records),
    )


def ingest_text(text: str) -> CardholderCollection:
    """Ingest a whole document already read into memory"""
    return ingest_lines(text.splitlines())
