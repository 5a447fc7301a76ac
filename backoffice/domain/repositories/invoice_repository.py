"""
Invoice repository interface.
Defines the contract for invoice data persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional

from backoffice.domain.models.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """Repository interface for Invoice aggregate."""

    @abstractmethod
    async def get_invoice_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Find an invoice with its items.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def get_project_invoices(self, project_id: str) -> List[Invoice]:
        """All invoices of a project with their items, newest first."""
        pass

    @abstractmethod
    async def update_invoice_status(
        self,
        invoice_id: str,
        status: InvoiceStatus,
        notes: Optional[str] = None
    ) -> None:
        """
        Change the status. sent_date / paid_date are filled in for
        sent / paid only when not set already.
        """
        pass

    @abstractmethod
    async def mark_sent(self, invoice_id: str, sent_date: datetime) -> None:
        """Set status to sent and overwrite sent_date."""
        pass

    @abstractmethod
    async def generate_invoice(self, project_id: str, issue_date: Optional[date] = None) -> Invoice:
        """
        Create a draft invoice from the payments of a project.
        Pending payments are billed line by line; without them the
        outstanding budget is billed. Due 30 days after the issue date.

        Raises:
            EntityNotFoundError: project does not exist
            ValidationError: nothing left to invoice
        """
        pass

    @abstractmethod
    async def delete_invoice(self, invoice_id: str) -> None:
        pass
