"""
Project domain model.
A project for a client together with the access credentials, hosting details
and payments it owns. The whole structure is treated as one aggregate.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from typing import Optional, List, Union
from enum import Enum

from backoffice.domain.models.base import BaseEntity, ValidationError
from backoffice.domain.models.status import ProjectStatus, display_status
from backoffice.domain.models.value_objects import DEFAULT_CURRENCY, convert_currency


class OtherAccessType(str, Enum):
    """Kind of an additional access entry."""
    EMAIL = "email"
    FTP = "ftp"
    SSH = "ssh"
    CMS = "cms"
    OTHER = "other"


class PaymentStatus(str, Enum):
    """Payment status."""
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Credential:
    """Username/password pair. Stored as plain text."""

    username: str = ""
    password: str = ""
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "password": self.password,
            "notes": self.notes
        }


@dataclass
class Hosting:
    """Hosting provider access."""

    provider: str = ""
    credentials: Credential = field(default_factory=Credential)
    url: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "credentials": self.credentials.to_dict(),
            "url": self.url,
            "notes": self.notes
        }


@dataclass
class OtherAccess:
    """Any other access a project needs (mailbox, FTP, SSH, CMS...)."""

    type: Union[OtherAccessType, str]
    name: str
    credentials: Credential = field(default_factory=Credential)
    notes: Optional[str] = None
    id: Optional[str] = None

    @property
    def type_value(self) -> str:
        """Type as a plain string, whether known or not."""
        return self.type.value if isinstance(self.type, OtherAccessType) else str(self.type)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type_value,
            "name": self.name,
            "credentials": self.credentials.to_dict(),
            "notes": self.notes
        }


@dataclass
class Payment:
    """A payment received (or expected) for a project."""

    amount: float = 0
    date: Optional[date] = None
    description: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING
    currency: str = DEFAULT_CURRENCY
    id: Optional[str] = None

    def __post_init__(self):
        if self.amount is not None and self.amount < 0:
            raise ValidationError("Payment amount cannot be negative", "amount")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "date": self.date.isoformat() if self.date else None,
            "description": self.description,
            "status": self.status.value if isinstance(self.status, PaymentStatus) else self.status,
            "currency": self.currency
        }


@dataclass
class Project(BaseEntity):
    """
    Project aggregate root.
    Credentials, hosting and other access are always present, even when no
    rows exist for them, so callers never need to null-check them.
    """

    name: str = ""
    client_id: Optional[str] = None
    client_name: str = "Unknown Client"
    description: str = ""
    url: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price: float = 0
    status: ProjectStatus = ProjectStatus.ACTIVE
    original_status: Optional[str] = None

    # May hold seed ids that are not persisted as foreign keys
    project_type_id: Optional[str] = None
    project_category_id: Optional[str] = None
    project_type: str = ""
    project_category: str = ""

    credentials: Credential = field(default_factory=Credential)
    hosting: Hosting = field(default_factory=Hosting)
    other_access: List[OtherAccess] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)

    @property
    def display_status(self) -> str:
        """Label shown for the project's status."""
        return display_status(self.status, self.original_status)

    @property
    def is_active(self) -> bool:
        return self.status == ProjectStatus.ACTIVE

    def total_paid(self, currency: str = DEFAULT_CURRENCY) -> float:
        """Sum of completed payments converted to one currency."""
        total = 0.0
        for payment in self.payments:
            if payment.status == PaymentStatus.COMPLETED:
                total += convert_currency(payment.amount, payment.currency, currency)
        return round(total, 2)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["status"] = self.status.value
        data["start_date"] = self.start_date.isoformat() if self.start_date else None
        data["end_date"] = self.end_date.isoformat() if self.end_date else None
        return data


@dataclass
class ProjectDraft:
    """
    Partial project used as input for create and update.
    None means "not provided". For payments and other_access, None leaves
    stored rows untouched while an empty list clears them.
    """

    name: Optional[str] = None
    client_id: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[Union[date, datetime, str]] = None
    end_date: Optional[Union[date, datetime, str]] = None
    price: Optional[float] = None
    status: Optional[str] = None
    original_status: Optional[str] = None
    project_type_id: Optional[str] = None
    project_category_id: Optional[str] = None
    project_type: Optional[str] = None
    project_category: Optional[str] = None
    credentials: Optional[Credential] = None
    hosting: Optional[Hosting] = None
    other_access: Optional[List[OtherAccess]] = None
    payments: Optional[List[Payment]] = None
    # Set when the caller explicitly sent an empty end date
    clear_end_date: bool = False

    def validate_for_create(self) -> None:
        """Required fields for a new project."""
        if not self.name:
            raise ValidationError("Project name is required", "name")
        if not self.client_id:
            raise ValidationError("Client is required", "client_id")
