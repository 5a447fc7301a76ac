"""
Unit tests for the Project aggregate, drafts and invoices.
"""

import pytest
from datetime import datetime, timezone

from backoffice.domain.models.base import ValidationError
from backoffice.domain.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from backoffice.domain.models.project import (
    Project, ProjectDraft, Payment, PaymentStatus, OtherAccess, OtherAccessType, Credential
)
from backoffice.domain.models.status import ProjectStatus
from backoffice.domain.models.value_objects import convert_currency, format_currency


class TestProject:
    """Test cases for the Project aggregate."""

    def test_defaults(self):
        project = Project(name="Site")

        assert project.status == ProjectStatus.ACTIVE
        assert project.client_name == "Unknown Client"
        assert project.credentials == Credential()
        assert project.hosting.provider == ""
        assert project.other_access == []
        assert project.payments == []
        assert isinstance(project.created_at, datetime)

    def test_display_status(self):
        project = Project(name="Site", status=ProjectStatus.ACTIVE, original_status="in-progress")
        assert project.display_status == "In Progress"

    def test_total_paid_counts_completed_payments(self):
        project = Project(name="Site", payments=[
            Payment(amount=500, status=PaymentStatus.COMPLETED),
            Payment(amount=250, status=PaymentStatus.PENDING),
            Payment(amount=100, status=PaymentStatus.COMPLETED, currency="EUR"),
        ])

        assert project.total_paid() == 609.0

    def test_to_dict(self):
        project = Project(id="p1", name="Site", status=ProjectStatus.COMPLETED)
        data = project.to_dict()

        assert data["id"] == "p1"
        assert data["status"] == "completed"
        assert data["start_date"] is None


class TestProjectDraft:
    """Test cases for ProjectDraft validation."""

    def test_name_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDraft(client_id="c1").validate_for_create()
        assert exc_info.value.field == "name"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_client_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDraft(name="Site").validate_for_create()
        assert exc_info.value.field == "client_id"

    def test_valid_draft(self):
        ProjectDraft(name="Site", client_id="c1").validate_for_create()


class TestChildValues:
    """Test cases for payments and other access entries."""

    def test_negative_payment_rejected(self):
        with pytest.raises(ValidationError):
            Payment(amount=-1)

    def test_other_access_type_value(self):
        assert OtherAccess(type=OtherAccessType.SSH, name="box").type_value == "ssh"
        assert OtherAccess(type="vpn", name="office").type_value == "vpn"


class TestInvoice:
    """Test cases for the Invoice entity."""

    def test_mark_sent_overwrites_sent_date(self):
        first = datetime(2024, 1, 1, tzinfo=timezone.utc)
        second = datetime(2024, 2, 1, tzinfo=timezone.utc)
        invoice = Invoice(invoice_number="INV-001")

        invoice.mark_sent(first)
        invoice.mark_sent(second)

        assert invoice.status == InvoiceStatus.SENT
        assert invoice.sent_date == second
        assert invoice.is_sent

    def test_items_total(self):
        invoice = Invoice(items=[InvoiceItem(amount=10.5), InvoiceItem(amount=4.25)])
        assert invoice.items_total == 14.75


class TestCurrency:
    """Test cases for currency helpers."""

    def test_convert_same_currency(self):
        assert convert_currency(10, "USD", "USD") == 10

    def test_convert_through_usd(self):
        assert convert_currency(100, "EUR", "USD") == 109.0

    def test_format_currency(self):
        assert format_currency(1500, "USD") == "$1,500.00"
        assert format_currency(3, "XYZ") == "XYZ 3.00"
