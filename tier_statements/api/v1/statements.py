"""POST /v1/statements - ingest raw records and render the four reports"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from tier_statements.api.v1.schemas import (
    CardholderSummary,
    InvalidRecordSchema,
    ReportsSchema,
    StatementsRequest,
    StatementsResponse,
)
from tier_statements.api.dependencies import get_request_id, get_settings
from tier_statements.config import Settings
from tier_statements.domain.parser import ingest_lines
from tier_statements.domain.statements import build_statement
from tier_statements.reports.formatter import render_all_reports
from tier_statements.utils.money import format_amount

router = APIRouter()


@router.post("/statements", response_model=StatementsResponse)
def create_statements(
    request_body: StatementsRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Parse a batch of raw record lines and return statements plus reports.

    Flow:
    1. Reject oversized bodies
    2. Ingest lines into valid cardholders and invalid records
    3. Compute per-cardholder statements in file order
    4. Render the four text reports
    """
    request_id = get_request_id(request)

    if len(request_body.lines) > app_settings.max_lines_per_request:
        logging.warning(
            "Statements request too large",
            extra={"request_id": request_id, "line_count": len(request_body.lines)},
        )
        raise HTTPException(
            status_code=413,
            detail=f"At most {app_settings.max_lines_per_request} lines per request",
        )

    collection = ingest_lines(request_body.lines)

    cardholders = []
    for cardholder in collection.cardholders:
        statement = build_statement(cardholder)
        cardholders.append(
            CardholderSummary(
                tier=cardholder.tier.label,
                account_number=cardholder.account_number,
                name=cardholder.name,
                current_balance=format_amount(statement.current_balance),
                minimum_payment=format_amount(statement.minimum_payment),
                purchase_points=statement.purchase_points,
            )
        )

    invalid_records = [
        InvalidRecordSchema(
            line_number=record.line_number,
            line=record.line,
            reason=record.reason,
            kind=record.kind.value,
        )
        for record in collection.invalid_records
    ]

    reports = render_all_reports(collection, app_settings.currency_symbol)

    return StatementsResponse(
        valid_count=collection.valid_count,
        invalid_count=collection.invalid_count,
        cardholders=cardholders,
        invalid_records=invalid_records,
        reports=ReportsSchema(**reports),
    )
