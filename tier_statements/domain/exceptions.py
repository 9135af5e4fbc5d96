"""Domain-specific exceptions"""

from tier_statements.domain.models import FailureKind


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordParseError(DomainException):
    """A raw record line could not be turned into a cardholder"""

    kind = FailureKind.STRUCTURAL


class StructuralError(RecordParseError):
    """Line is missing fields needed to identify the account"""

    kind = FailureKind.STRUCTURAL


class InvalidCategoryError(RecordParseError):
    """Category code does not map to a known tier"""

    kind = FailureKind.CATEGORY

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"invalid category '{category}': expected one of 1, 2, 3")


class FieldParseError(RecordParseError):
    """Numeric field is not a finite decimal"""

    kind = FailureKind.FIELD

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"invalid number '{value}' for {field_name}")


class CollectionNotBuiltError(DomainException):
    """Sorting or reporting was requested without an ingested collection"""

    pass
