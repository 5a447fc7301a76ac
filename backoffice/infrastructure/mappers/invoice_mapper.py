"""
Invoice mapper for converting between invoice rows and domain entities.
"""

import logging
from typing import List, Optional

from backoffice.domain.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from backoffice.domain.repositories.store import Row
from .dates import parse_calendar_date


logger = logging.getLogger(__name__)


class InvoiceMapper:
    """Maps ``invoices`` / ``invoice_items`` rows to Invoice entities."""

    def row_to_domain(self, row: Row, item_rows: Optional[List[Row]] = None) -> Invoice:
        """Convert an invoice row and its item rows to an Invoice."""
        return Invoice(
            id=row.get("id"),
            project_id=row.get("project_id"),
            invoice_number=row.get("invoice_number") or "",
            amount=float(row.get("amount") or 0),
            status=self._status(row.get("status")),
            issue_date=parse_calendar_date(row.get("issue_date")),
            due_date=parse_calendar_date(row.get("due_date")),
            sent_date=row.get("sent_date"),
            paid_date=row.get("paid_date"),
            notes=row.get("notes"),
            items=[self.item_row_to_domain(item) for item in item_rows or []],
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at")
        )

    def item_row_to_domain(self, row: Row) -> InvoiceItem:
        return InvoiceItem(
            id=row.get("id"),
            invoice_id=row.get("invoice_id"),
            description=row.get("description") or "",
            quantity=float(row.get("quantity") or 0),
            unit_price=float(row.get("unit_price") or 0),
            amount=float(row.get("amount") or 0),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at")
        )

    def _status(self, value: Optional[str]) -> InvoiceStatus:
        try:
            return InvoiceStatus(value)
        except ValueError:
            logger.warning(f"Unknown invoice status '{value}', reading as draft")
            return InvoiceStatus.DRAFT
