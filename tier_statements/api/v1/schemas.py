"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List


class StatementsRequest(BaseModel):
    """Request body for POST /v1/statements"""

    lines: List[str] = Field(default_factory=list, description="Raw input lines, one record per line")


class CardholderSummary(BaseModel):
    """Derived figures for one valid record"""

    tier: str
    account_number: str
    name: str
    current_balance: str
    minimum_payment: str
    purchase_points: int


class InvalidRecordSchema(BaseModel):
    """Single rejected line"""

    line_number: int
    line: str
    reason: str
    kind: str


class ReportsSchema(BaseModel):
    """The four rendered text reports"""

    original: str
    by_name: str
    by_balance: str
    invalid: str


class StatementsResponse(BaseModel):
    """Response for POST /v1/statements"""

    valid_count: int
    invalid_count: int
    cardholders: List[CardholderSummary]
    invalid_records: List[InvalidRecordSchema]
    reports: ReportsSchema
