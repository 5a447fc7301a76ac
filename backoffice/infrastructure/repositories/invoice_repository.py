"""
Invoice repository implementation on a BackingStore.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from backoffice.domain.models.base import EntityNotFoundError, utcnow
from backoffice.domain.models.invoice import (
    Invoice, InvoiceStatus, PAYMENT_TERMS_DAYS, billable_items, next_invoice_number
)
from backoffice.domain.repositories.invoice_repository import InvoiceRepository
from backoffice.domain.repositories.store import BackingStore, Row, eq, in_
from backoffice.infrastructure.mappers.invoice_mapper import InvoiceMapper
from backoffice.infrastructure.mappers.payment_mapper import decode_payments


logger = logging.getLogger(__name__)


class StoreInvoiceRepository(InvoiceRepository):
    """Invoices and their items over a backing store."""

    def __init__(self, store: BackingStore):
        self.store = store
        self.mapper = InvoiceMapper()

    async def get_invoice_by_id(self, invoice_id: str) -> Optional[Invoice]:
        row = await self.store.maybe_single("invoices", [eq("id", invoice_id)])
        if not row:
            return None
        items = await self.store.select("invoice_items", [eq("invoice_id", invoice_id)])
        return self.mapper.row_to_domain(row, items)

    async def get_project_invoices(self, project_id: str) -> List[Invoice]:
        rows = await self.store.select(
            "invoices", [eq("project_id", project_id)], order_by="created_at", descending=True
        )
        if not rows:
            return []

        item_rows = await self.store.select(
            "invoice_items", [in_("invoice_id", [row["id"] for row in rows])]
        )
        items_by_invoice: Dict[str, List[Row]] = defaultdict(list)
        for item in item_rows:
            items_by_invoice[item["invoice_id"]].append(item)

        return [self.mapper.row_to_domain(row, items_by_invoice.get(row["id"], [])) for row in rows]

    async def update_invoice_status(
        self,
        invoice_id: str,
        status: InvoiceStatus,
        notes: Optional[str] = None
    ) -> None:
        current = await self.store.maybe_single("invoices", [eq("id", invoice_id)])
        if not current:
            raise EntityNotFoundError("Invoice", invoice_id)

        status = InvoiceStatus(status)
        values: Row = {"status": status.value}
        if status == InvoiceStatus.SENT and current.get("sent_date") is None:
            values["sent_date"] = utcnow()
        elif status == InvoiceStatus.PAID and current.get("paid_date") is None:
            values["paid_date"] = utcnow()
        if notes is not None:
            values["notes"] = notes

        await self.store.update("invoices", values, [eq("id", invoice_id)])
        logger.info(f"Invoice {invoice_id} status set to {status.value}")

    async def mark_sent(self, invoice_id: str, sent_date: datetime) -> None:
        rows = await self.store.update(
            "invoices",
            {"status": InvoiceStatus.SENT.value, "sent_date": sent_date},
            [eq("id", invoice_id)]
        )
        if not rows:
            raise EntityNotFoundError("Invoice", invoice_id)

    async def generate_invoice(self, project_id: str, issue_date: Optional[date] = None) -> Invoice:
        project = await self.store.maybe_single("projects", [eq("id", project_id)])
        if not project:
            raise EntityNotFoundError("Project", project_id)

        payments = decode_payments(await self.store.select("payments", [eq("project_id", project_id)]))
        items = billable_items(project.get("name") or "", float(project.get("budget") or 0), payments)
        issue_date = issue_date or date.today()

        async with self.store.transaction():
            numbers = await self.store.select("invoices", columns=["invoice_number"])
            [row] = await self.store.insert("invoices", {
                "project_id": project_id,
                "invoice_number": next_invoice_number(r.get("invoice_number") for r in numbers),
                "amount": round(sum(item.amount for item in items), 2),
                "status": InvoiceStatus.DRAFT.value,
                "issue_date": issue_date.isoformat(),
                "due_date": (issue_date + timedelta(days=PAYMENT_TERMS_DAYS)).isoformat(),
            })
            await self.store.insert("invoice_items", [
                {
                    "invoice_id": row["id"],
                    "description": item.description,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                    "amount": item.amount,
                }
                for item in items
            ])

        logger.info(f"Generated invoice {row['invoice_number']} for project {project_id}")
        return await self.get_invoice_by_id(row["id"])

    async def delete_invoice(self, invoice_id: str) -> None:
        async with self.store.transaction():
            await self.store.delete("invoice_items", [eq("invoice_id", invoice_id)])
            await self.store.delete("invoices", [eq("id", invoice_id)])
