"""
Invoice DTOs for the application layer.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from backoffice.domain.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


class SendInvoiceRequestDTO(RequestDTO):
    """DTO for sending an invoice to a client."""

    invoice_id: str = Field(min_length=1)
    client_email: EmailStr
    client_name: str = Field(min_length=1)
    project_name: str = Field(min_length=1)


class UpdateInvoiceStatusRequestDTO(RequestDTO):
    status: InvoiceStatus
    notes: Optional[str] = None


class SendInvoiceResponseDTO(BaseDTO):
    """Outcome of an invoice send."""

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


class InvoiceItemResponseDTO(ResponseDTO):
    invoice_id: Optional[str] = None
    description: str
    quantity: float
    unit_price: float
    amount: float

    @classmethod
    def from_domain(cls, item: InvoiceItem) -> "InvoiceItemResponseDTO":
        return cls(
            id=item.id,
            invoice_id=item.invoice_id,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            amount=item.amount,
            created_at=item.created_at,
            updated_at=item.updated_at
        )


class InvoiceResponseDTO(ResponseDTO):
    """DTO for an invoice with its items."""

    project_id: Optional[str] = None
    invoice_number: str
    amount: float
    status: str
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    sent_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None
    notes: Optional[str] = None
    items: List[InvoiceItemResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            project_id=invoice.project_id,
            invoice_number=invoice.invoice_number,
            amount=invoice.amount,
            status=invoice.status.value,
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            sent_date=invoice.sent_date,
            paid_date=invoice.paid_date,
            notes=invoice.notes,
            items=[InvoiceItemResponseDTO.from_domain(item) for item in invoice.items],
            created_at=invoice.created_at,
            updated_at=invoice.updated_at
        )
