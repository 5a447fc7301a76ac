"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Dict
from dataclasses import dataclass, field


def utcnow() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


@dataclass
class BaseEntity:
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if key.startswith('_'):
                continue
            if isinstance(value, datetime):
                data[key] = value.isoformat()
            elif hasattr(value, "to_dict"):
                data[key] = value.to_dict()
            elif isinstance(value, list):
                data[key] = [
                    item.to_dict() if hasattr(item, "to_dict") else item
                    for item in value
                ]
            else:
                data[key] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class SchemaMismatchError(DomainException):
    """
    Raised when the backing store is missing a column the application writes.
    This is an operational condition (the schema needs a migration), not a
    problem with the caller's input.
    """

    def __init__(self, table: str, detail: str):
        message = (
            f"The database schema needs to be updated. "
            f"Missing required columns in {table} table."
        )
        super().__init__(message, "SCHEMA_MISMATCH")
        self.table = table
        self.detail = detail


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class StoreError(DomainException):
    """Raised when the backing store rejects or fails an operation."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message, "STORE_ERROR")
        self.table = table

    @property
    def is_missing_column(self) -> bool:
        """Check whether the store complained about an unknown column."""
        text = self.message.lower()
        return "column" in text and (
            "does not exist" in text
            or "no such column" in text
            or "has no column named" in text
        )


class MultipleRowsError(StoreError):
    """Raised when a zero-or-one query matched more than one row."""

    def __init__(self, table: str, count: int):
        super().__init__(
            f"Expected at most one row from {table}, got {count}",
            table
        )
        self.count = count
