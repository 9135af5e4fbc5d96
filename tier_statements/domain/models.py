"""Domain models - pure Python dataclasses representing cardholder records"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class Tier(Enum):
    """Benefit tier, keyed by the category code used in the input file"""

    SAPPHIRE = "1"
    DIAMOND = "2"
    BLUE_DIAMOND = "3"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def from_code(cls, code: str) -> Optional["Tier"]:
        """Map a category code to its tier, or None if unknown"""
        for tier in cls:
            if tier.value == code:
                return tier
        return None


class FailureKind(Enum):
    """Why a raw line was rejected"""

    STRUCTURAL = "structural"
    CATEGORY = "category"
    FIELD = "field"


@dataclass(frozen=True)
class Cardholder:
    """One monthly account record for a single tier"""

    tier: Tier
    account_number: str
    name: str
    previous_balance: Decimal
    payment: Decimal
    purchases: Tuple[Decimal, ...] = ()

    @property
    def total_purchases(self) -> Decimal:
        return sum(self.purchases, Decimal("0"))


@dataclass(frozen=True)
class InvalidRecord:
    """Raw line that failed parsing, paired with the reason"""

    line: str
    reason: str
    kind: FailureKind
    line_number: int


@dataclass(frozen=True)
class CardholderCollection:
    """Result of one ingestion pass, both sequences in file order"""

    cardholders: Tuple[Cardholder, ...] = field(default_factory=tuple)
    invalid_records: Tuple[InvalidRecord, ...] = field(default_factory=tuple)

    @property
    def valid_count(self) -> int:
        return len(self.cardholders)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_records)


@dataclass(frozen=True)
class Statement:
    """Derived monthly figures for one cardholder"""

    cardholder: Cardholder
    total_purchases: Decimal
    interest: Decimal
    current_balance: Decimal
    minimum_payment: Decimal
    purchase_points: int
