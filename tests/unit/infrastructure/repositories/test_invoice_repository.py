"""
Unit tests for the invoice repository.
"""

import pytest
from datetime import date, datetime, timezone

from backoffice.domain.models.base import EntityNotFoundError, ValidationError
from backoffice.domain.models.invoice import InvoiceStatus
from backoffice.infrastructure.repositories.invoice_repository import StoreInvoiceRepository
from backoffice.infrastructure.stores.memory_store import InMemoryStore


async def seed_invoice(store, number="INV-001", project_id="p1", created_at=None, **values):
    row = {
        "project_id": project_id,
        "invoice_number": number,
        "amount": 300,
        "status": "draft",
        "issue_date": "2024-03-01",
        "due_date": "2024-03-31",
        **values,
    }
    if created_at:
        row["created_at"] = created_at
    [invoice] = await store.insert("invoices", row)
    await store.insert("invoice_items", [
        {"invoice_id": invoice["id"], "description": "Design", "quantity": 2, "unit_price": 100, "amount": 200},
        {"invoice_id": invoice["id"], "description": "Hosting", "quantity": 1, "unit_price": 100, "amount": 100},
    ])
    return invoice


class TestInvoiceRepository:
    """Test cases for StoreInvoiceRepository."""

    def setup_method(self):
        self.store = InMemoryStore()
        self.repository = StoreInvoiceRepository(self.store)

    @pytest.mark.asyncio
    async def test_get_invoice_with_items(self):
        row = await seed_invoice(self.store)

        invoice = await self.repository.get_invoice_by_id(row["id"])

        assert invoice.invoice_number == "INV-001"
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.due_date.isoformat() == "2024-03-31"
        assert invoice.items_total == 300
        assert await self.repository.get_invoice_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_project_invoices_newest_first(self):
        await seed_invoice(self.store, "INV-001", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        await seed_invoice(self.store, "INV-002", created_at=datetime(2024, 2, 1, tzinfo=timezone.utc))
        await seed_invoice(self.store, "INV-900", project_id="other")

        invoices = await self.repository.get_project_invoices("p1")

        assert [i.invoice_number for i in invoices] == ["INV-002", "INV-001"]
        assert all(len(i.items) == 2 for i in invoices)
        assert await self.repository.get_project_invoices("none") == []

    @pytest.mark.asyncio
    async def test_status_dates_are_set_once(self):
        row = await seed_invoice(self.store)

        await self.repository.update_invoice_status(row["id"], InvoiceStatus.SENT)
        first = (await self.repository.get_invoice_by_id(row["id"])).sent_date
        await self.repository.update_invoice_status(row["id"], InvoiceStatus.SENT, notes="Reminder")
        invoice = await self.repository.get_invoice_by_id(row["id"])

        assert first is not None
        assert invoice.sent_date == first
        assert invoice.notes == "Reminder"

        await self.repository.update_invoice_status(row["id"], InvoiceStatus.PAID)
        invoice = await self.repository.get_invoice_by_id(row["id"])
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.paid_date is not None

    @pytest.mark.asyncio
    async def test_mark_sent_overwrites(self):
        earlier = datetime(2024, 1, 1, tzinfo=timezone.utc)
        later = datetime(2024, 6, 1, tzinfo=timezone.utc)
        row = await seed_invoice(self.store, status="sent", sent_date=earlier)

        await self.repository.mark_sent(row["id"], later)

        assert (await self.repository.get_invoice_by_id(row["id"])).sent_date == later

    @pytest.mark.asyncio
    async def test_missing_invoice(self):
        with pytest.raises(EntityNotFoundError):
            await self.repository.update_invoice_status("missing", InvoiceStatus.PAID)
        with pytest.raises(EntityNotFoundError):
            await self.repository.mark_sent("missing", datetime.now(timezone.utc))

    @pytest.mark.asyncio
    async def test_delete_invoice_with_items(self):
        row = await seed_invoice(self.store)

        await self.repository.delete_invoice(row["id"])

        assert self.store.dump("invoices") == []
        assert self.store.dump("invoice_items") == []


async def seed_project(store, budget=1500, payments=()):
    [project] = await store.insert("projects", {"name": "Acme Site", "budget": budget, "status": "active"})
    for amount, day, status in payments:
        await store.insert("payments", {
            "project_id": project["id"], "amount": amount, "payment_date": day, "payment_method": status
        })
    return project


class TestGenerateInvoice:
    """Test cases for invoice generation from payments."""

    def setup_method(self):
        self.store = InMemoryStore()
        self.repository = StoreInvoiceRepository(self.store)

    @pytest.mark.asyncio
    async def test_pending_payments_become_items(self):
        project = await seed_project(self.store, payments=[
            (500, "2024-01-10", "completed"),
            (400, "2024-03-01", "pending"),
            (300, "2024-02-15", "pending"),
        ])

        invoice = await self.repository.generate_invoice(project["id"], date(2024, 4, 1))

        assert invoice.invoice_number == "INV-000001"
        assert invoice.project_id == project["id"]
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.amount == 700
        assert invoice.issue_date == date(2024, 4, 1)
        assert invoice.due_date == date(2024, 5, 1)
        assert [(i.description, i.amount) for i in invoice.items] == [
            ("Acme Site - payment due 2024-02-15", 300),
            ("Acme Site - payment due 2024-03-01", 400),
        ]
        assert invoice.items_total == 700

    @pytest.mark.asyncio
    async def test_outstanding_budget_and_numbering(self):
        await seed_invoice(self.store, "INV-000041")
        project = await seed_project(self.store, payments=[(500, "2024-01-10", "completed")])

        invoice = await self.repository.generate_invoice(project["id"])

        assert invoice.invoice_number == "INV-000042"
        assert invoice.amount == 1000
        assert [i.description for i in invoice.items] == ["Acme Site"]
        assert invoice.issue_date == date.today()
        assert [i.invoice_number for i in await self.repository.get_project_invoices(project["id"])] == ["INV-000042"]

    @pytest.mark.asyncio
    async def test_nothing_to_invoice(self):
        project = await seed_project(self.store, payments=[(1500, "2024-01-10", "completed")])

        with pytest.raises(ValidationError):
            await self.repository.generate_invoice(project["id"])

        assert self.store.dump("invoices") == []

    @pytest.mark.asyncio
    async def test_missing_project(self):
        with pytest.raises(EntityNotFoundError):
            await self.repository.generate_invoice("missing")
