"""
Domain models for the agency back-office.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    SchemaMismatchError,
    EntityNotFoundError,
    StoreError,
    MultipleRowsError,
    BusinessRuleViolation
)

# Identifiers and statuses
from .identifiers import (
    IdKind,
    PersistedId,
    SeedId,
    InvalidId,
    classify_id,
    is_persisted_id
)
from .status import ProjectStatus, normalize_status, display_status, resolve_original_status

# Value Objects
from .value_objects import Currency, convert_currency, format_currency

# Domain entities
from .project import (
    Project,
    ProjectDraft,
    Credential,
    Hosting,
    OtherAccess,
    OtherAccessType,
    Payment,
    PaymentStatus
)
from .project_type import ProjectType, ProjectCategory
from .invoice import Invoice, InvoiceItem, InvoiceStatus
from .client import Client, Company

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "SchemaMismatchError",
    "EntityNotFoundError",
    "StoreError",
    "MultipleRowsError",
    "BusinessRuleViolation",
    "IdKind",
    "PersistedId",
    "SeedId",
    "InvalidId",
    "classify_id",
    "is_persisted_id",
    "ProjectStatus",
    "normalize_status",
    "display_status",
    "resolve_original_status",
    "Currency",
    "convert_currency",
    "format_currency",
    "Project",
    "ProjectDraft",
    "Credential",
    "Hosting",
    "OtherAccess",
    "OtherAccessType",
    "Payment",
    "PaymentStatus",
    "ProjectType",
    "ProjectCategory",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Client",
    "Company",
]
