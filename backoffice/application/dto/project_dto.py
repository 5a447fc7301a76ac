"""
Project DTOs for the application layer.
Data Transfer Objects for project-related operations.
"""

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from backoffice.domain.models.project import (
    Project, ProjectDraft, Credential, Hosting, OtherAccess, OtherAccessType, Payment, PaymentStatus
)
from backoffice.domain.models.project_type import ProjectType, ProjectCategory
from backoffice.domain.models.value_objects import DEFAULT_CURRENCY
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


# Alias so the Payment "date" field does not shadow the type
CalendarDate = date


def drop_time_of_day(value: Any) -> Any:
    """Accept date-times for calendar dates; the time of day is dropped."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
        return value[:10]
    return value


# Nested DTOs
class CredentialDTO(BaseDTO):
    """Username/password pair."""

    username: str = ""
    password: str = ""
    notes: Optional[str] = ""

    def to_domain(self) -> Credential:
        return Credential(username=self.username, password=self.password, notes=self.notes or "")

    @classmethod
    def from_domain(cls, credential: Credential) -> "CredentialDTO":
        return cls(username=credential.username, password=credential.password, notes=credential.notes)


class HostingDTO(BaseDTO):
    """Hosting provider access."""

    provider: str = ""
    credentials: CredentialDTO = Field(default_factory=CredentialDTO)
    url: Optional[str] = None
    notes: Optional[str] = None

    def to_domain(self) -> Hosting:
        return Hosting(
            provider=self.provider,
            credentials=self.credentials.to_domain(),
            url=self.url,
            notes=self.notes
        )

    @classmethod
    def from_domain(cls, hosting: Hosting) -> "HostingDTO":
        return cls(
            provider=hosting.provider,
            credentials=CredentialDTO.from_domain(hosting.credentials),
            url=hosting.url,
            notes=hosting.notes
        )


class OtherAccessRequestDTO(BaseDTO):
    """Additional access entry in requests."""

    type: OtherAccessType = Field(description="email, ftp, ssh, cms or other")
    name: str = Field(min_length=1)
    credentials: CredentialDTO = Field(default_factory=CredentialDTO)
    notes: Optional[str] = None

    def to_domain(self) -> OtherAccess:
        return OtherAccess(
            type=OtherAccessType(self.type),
            name=self.name,
            credentials=self.credentials.to_domain(),
            notes=self.notes
        )


class OtherAccessResponseDTO(BaseDTO):
    """Additional access entry in responses. Unknown stored types pass through."""

    id: Optional[str] = None
    type: str
    name: str
    credentials: CredentialDTO
    notes: Optional[str] = None

    @classmethod
    def from_domain(cls, access: OtherAccess) -> "OtherAccessResponseDTO":
        return cls(
            id=access.id,
            type=access.type_value,
            name=access.name,
            credentials=CredentialDTO.from_domain(access.credentials),
            notes=access.notes
        )


class PaymentDTO(BaseDTO):
    """A payment in requests and responses."""

    id: Optional[str] = None
    amount: float = Field(default=0, ge=0)
    date: Optional[CalendarDate] = None
    description: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)

    @field_validator("date", mode="before")
    @classmethod
    def calendar_date(cls, value: Any) -> Any:
        return drop_time_of_day(value)

    def to_domain(self) -> Payment:
        return Payment(
            amount=self.amount,
            date=self.date,
            description=self.description,
            status=PaymentStatus(self.status),
            currency=self.currency
        )

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentDTO":
        return cls(
            id=payment.id,
            amount=payment.amount,
            date=payment.date,
            description=payment.description,
            status=payment.status,
            currency=payment.currency
        )


# Request DTOs
class ProjectRequestDTO(RequestDTO):
    """Fields shared by create and update. Omitted fields are left alone."""

    name: Optional[str] = Field(default=None, max_length=255)
    client_id: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = Field(default=None, description="Any label; unknown ones are stored as active")
    original_status: Optional[str] = None
    project_type_id: Optional[str] = None
    project_category_id: Optional[str] = None
    project_type: Optional[str] = None
    project_category: Optional[str] = None
    credentials: Optional[CredentialDTO] = None
    hosting: Optional[HostingDTO] = None
    other_access: Optional[List[OtherAccessRequestDTO]] = None
    payments: Optional[List[PaymentDTO]] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def calendar_dates(cls, value: Any) -> Any:
        return drop_time_of_day(value)

    def to_draft(self) -> ProjectDraft:
        return ProjectDraft(
            name=self.name,
            client_id=self.client_id,
            description=self.description,
            url=self.url,
            start_date=self.start_date,
            end_date=self.end_date,
            price=self.price,
            status=self.status,
            original_status=self.original_status,
            project_type_id=self.project_type_id,
            project_category_id=self.project_category_id,
            project_type=self.project_type,
            project_category=self.project_category,
            credentials=self.credentials.to_domain() if self.credentials else None,
            hosting=self.hosting.to_domain() if self.hosting else None,
            other_access=(
                [access.to_domain() for access in self.other_access]
                if self.other_access is not None else None
            ),
            payments=(
                [payment.to_domain() for payment in self.payments]
                if self.payments is not None else None
            ),
            clear_end_date="end_date" in self.model_fields_set and self.end_date is None
        )


class CreateProjectRequestDTO(ProjectRequestDTO):
    """DTO for creating a project. Name and client are checked by the domain."""
    pass


class UpdateProjectRequestDTO(ProjectRequestDTO):
    """DTO for updating a project."""
    pass


# Response DTOs
class ProjectResponseDTO(ResponseDTO):
    """DTO for a full project aggregate."""

    name: str
    client_id: Optional[str] = None
    client_name: str
    description: str = ""
    url: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price: float = 0
    status: str
    original_status: Optional[str] = None
    display_status: str
    project_type_id: Optional[str] = None
    project_category_id: Optional[str] = None
    project_type: str = ""
    project_category: str = ""
    credentials: CredentialDTO
    hosting: HostingDTO
    other_access: List[OtherAccessResponseDTO] = Field(default_factory=list)
    payments: List[PaymentDTO] = Field(default_factory=list)
    total_paid: float = 0

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            client_id=project.client_id,
            client_name=project.client_name,
            description=project.description,
            url=project.url,
            start_date=project.start_date,
            end_date=project.end_date,
            price=project.price,
            status=project.status.value,
            original_status=project.original_status,
            display_status=project.display_status,
            project_type_id=project.project_type_id,
            project_category_id=project.project_category_id,
            project_type=project.project_type,
            project_category=project.project_category,
            credentials=CredentialDTO.from_domain(project.credentials),
            hosting=HostingDTO.from_domain(project.hosting),
            other_access=[OtherAccessResponseDTO.from_domain(a) for a in project.other_access],
            payments=[PaymentDTO.from_domain(p) for p in project.payments],
            total_paid=project.total_paid(),
            created_at=project.created_at,
            updated_at=project.updated_at
        )


# Project types and categories
class ProjectTypeRequestDTO(RequestDTO):
    name: str = Field(min_length=1, max_length=255)


class ProjectCategoryRequestDTO(RequestDTO):
    name: str = Field(min_length=1, max_length=255)
    project_type_id: str


class ProjectTypeResponseDTO(ResponseDTO):
    name: str

    @classmethod
    def from_domain(cls, project_type: ProjectType) -> "ProjectTypeResponseDTO":
        return cls(
            id=project_type.id,
            name=project_type.name,
            created_at=project_type.created_at,
            updated_at=project_type.updated_at
        )


class ProjectCategoryResponseDTO(ResponseDTO):
    name: str
    project_type_id: Optional[str] = None

    @classmethod
    def from_domain(cls, category: ProjectCategory) -> "ProjectCategoryResponseDTO":
        return cls(
            id=category.id,
            name=category.name,
            project_type_id=category.project_type_id,
            created_at=category.created_at,
            updated_at=category.updated_at
        )
