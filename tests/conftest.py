"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from pathlib import Path
from typing import Callable, List
from fastapi.testclient import TestClient
from tier_statements.api.main import create_app
from tier_statements.domain.models import Cardholder, CardholderCollection, Tier
from tier_statements.domain.parser import ingest_lines


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_path() -> Path:
    """Record file with valid, invalid and blank lines"""
    return FIXTURES_DIR / "accounts.txt"


@pytest.fixture
def sample_lines(sample_path: Path) -> List[str]:
    """
    Lines of the sample record file.

    Valid: 10001 (Sapphire), 10003 (Blue Diamond), 10004 (Diamond), 10005 (Sapphire)
    Invalid: line 2 (bad purchase), line 3 (category 4), line 8 (too few fields)
    Line 5 is blank.
    """
    return sample_path.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def sample_collection(sample_lines: List[str]) -> CardholderCollection:
    return ingest_lines(sample_lines)


@pytest.fixture
def make_cardholder() -> Callable[..., Cardholder]:
    """Factory for cardholders with sensible defaults"""

    def _make(
        tier: Tier = Tier.SAPPHIRE,
        account_number: str = "10001",
        name: str = "Smith, Pat",
        previous_balance: str = "0",
        payment: str = "0",
        purchases: tuple = (),
    ) -> Cardholder:
        return Cardholder(
            tier=tier,
            account_number=account_number,
            name=name,
            previous_balance=Decimal(previous_balance),
            payment=Decimal(payment),
            purchases=tuple(Decimal(p) for p in purchases),
        )

    return _make
