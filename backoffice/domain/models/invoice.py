"""
Invoice domain model.
Invoices are generated from the payments of a project, then change status
as they are sent to the client and paid.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, date
from typing import Iterable, Optional, List
from enum import Enum

from backoffice.domain.models.base import BaseEntity, ValidationError, utcnow
from backoffice.domain.models.project import Payment, PaymentStatus


INVOICE_NUMBER_PATTERN = "INV-{number:06d}"
PAYMENT_TERMS_DAYS = 30


class InvoiceStatus(str, Enum):
    """Invoice status."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


@dataclass
class InvoiceItem(BaseEntity):
    """Invoice line item."""

    invoice_id: Optional[str] = None
    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    amount: float = 0


@dataclass
class Invoice(BaseEntity):
    """Invoice aggregate root."""

    project_id: Optional[str] = None
    invoice_number: str = ""
    amount: float = 0
    status: InvoiceStatus = InvoiceStatus.DRAFT
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    sent_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None
    notes: Optional[str] = None
    items: List[InvoiceItem] = field(default_factory=list)

    @property
    def is_sent(self) -> bool:
        return self.sent_date is not None

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID

    @property
    def items_total(self) -> float:
        return round(sum(item.amount for item in self.items), 2)

    def mark_sent(self, when: Optional[datetime] = None) -> None:
        """Mark as sent. Overwrites any earlier sent date."""
        self.status = InvoiceStatus.SENT
        self.sent_date = when or utcnow()
        self.mark_as_updated()


def next_invoice_number(existing: Iterable[Optional[str]]) -> str:
    """Number following the highest ``INV-<digits>`` in use; other numbers are ignored."""
    highest = 0
    for number in existing:
        match = re.fullmatch(r"INV-(\d+)", number or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return INVOICE_NUMBER_PATTERN.format(number=highest + 1)


def _payment_line(project_name: str, payment: Payment) -> str:
    if payment.date:
        return f"{project_name} - payment due {payment.date.isoformat()}"
    return f"{project_name} - payment"


def billable_items(project_name: str, budget: float, payments: Iterable[Payment]) -> List[InvoiceItem]:
    """
    Invoice lines for a project.

    Each pending payment becomes one line, oldest first. Without pending
    payments the budget not yet covered by completed payments is billed as a
    single line.

    Raises:
        ValidationError: nothing is left to invoice
    """
    payments = list(payments)
    pending = sorted(
        (p for p in payments if p.status == PaymentStatus.PENDING and p.amount),
        key=lambda p: p.date or date.min
    )
    if pending:
        return [
            InvoiceItem(
                description=p.description or _payment_line(project_name, p),
                quantity=1,
                unit_price=p.amount,
                amount=p.amount
            )
            for p in pending
        ]

    paid = sum(p.amount for p in payments if p.status == PaymentStatus.COMPLETED)
    outstanding = round((budget or 0) - paid, 2)
    if outstanding <= 0:
        raise ValidationError("Nothing left to invoice for this project", "project_id")
    return [InvoiceItem(description=project_name, quantity=1, unit_price=outstanding, amount=outstanding)]
