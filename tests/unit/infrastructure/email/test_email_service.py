"""
Unit tests for the email service and template loader.
"""

import smtplib
import pytest
from datetime import date
from unittest.mock import patch

from backoffice.config import Settings
from backoffice.domain.models.invoice import Invoice, InvoiceItem
from backoffice.infrastructure.email.email_service import EmailService
from backoffice.infrastructure.email.template_loader import EmailTemplateLoader


def make_invoice():
    return Invoice(
        id="i1",
        invoice_number="INV-007",
        amount=1200,
        due_date=date(2024, 3, 31),
        items=[InvoiceItem(description="Build", quantity=2, unit_price=600, amount=1200)]
    )


class TestEmailTemplateLoader:
    """Test cases for EmailTemplateLoader."""

    def setup_method(self):
        self.loader = EmailTemplateLoader()

    def test_render_text_template(self):
        text = self.loader.render_template("invoice_sent.txt", {
            "client_name": "Acme Corp",
            "project_name": "Acme Site",
            "invoice": make_invoice(),
            "company_name": "Studio"
        })

        assert "Hello Acme Corp," in text
        assert "- Build: 2 x $600.00 = $1,200.00" in text
        assert "Total: $1,200.00" in text
        assert "Due date: 2024-03-31" in text

    def test_html_is_escaped(self):
        html = self.loader.render_template("invoice_sent.html", {
            "client_name": "<b>Acme</b>",
            "project_name": "Acme Site",
            "invoice": make_invoice(),
            "company_name": "Studio"
        })

        assert "&lt;b&gt;Acme&lt;/b&gt;" in html

    def test_template_exists(self):
        assert self.loader.template_exists("invoice_sent.html") is True
        assert self.loader.template_exists("welcome.html") is False


class TestEmailService:
    """Test cases for EmailService."""

    @pytest.mark.asyncio
    async def test_without_smtp_the_email_is_logged(self):
        service = EmailService(config=Settings(smtp_host=None, smtp_user=None, smtp_password=None))

        result = await service.send_invoice_notification(
            "billing@acmecorp.com", "Acme Corp", "Acme Site", make_invoice()
        )

        assert result["success"] is True
        assert result["logged"] is True
        [email] = service.get_sent_emails()
        assert email["subject"] == "Invoice INV-007 - Acme Site"
        assert email["template"] == "invoice_sent"

    @pytest.mark.asyncio
    async def test_smtp_delivery(self):
        service = EmailService(config=Settings(
            smtp_host="smtp.acmecorp.com", smtp_user="mailer", smtp_password="secret"
        ))

        with patch.object(service, "_send_via_smtp") as send:
            result = await service.send_invoice_notification(
                "billing@acmecorp.com", "Acme Corp", "Acme Site", make_invoice()
            )

        assert result["success"] is True
        assert result["recipients"] == ["billing@acmecorp.com"]
        mime_message, recipient = send.call_args.args
        assert recipient == "billing@acmecorp.com"
        assert mime_message["Subject"] == "Invoice INV-007 - Acme Site"
        assert service.get_sent_emails() == []

    @pytest.mark.asyncio
    async def test_smtp_failure(self):
        service = EmailService(config=Settings(
            smtp_host="smtp.acmecorp.com", smtp_user="mailer", smtp_password="secret"
        ))

        with patch.object(service, "_send_via_smtp", side_effect=smtplib.SMTPException("Connection refused")):
            result = await service.send_invoice_notification(
                "billing@acmecorp.com", "Acme Corp", "Acme Site", make_invoice()
            )

        assert result["success"] is False
        assert result["error"] == "Connection refused"
