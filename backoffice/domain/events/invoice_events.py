"""
Domain events related to invoices.
"""

from typing import Dict, Any
from datetime import datetime

from .base import DomainEvent


class InvoiceSent(DomainEvent):
    """Event fired when an invoice is sent to a client."""

    def __init__(self,
                 invoice_id: str,
                 invoice_number: str,
                 client_email: str,
                 sent_date: datetime,
                 **kwargs):
        super().__init__(**kwargs)
        self.invoice_id = invoice_id
        self.invoice_number = invoice_number
        self.client_email = client_email
        self.sent_date = sent_date

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "invoice_id": self.invoice_id,
            "invoice_number": self.invoice_number,
            "client_email": self.client_email,
            "sent_date": self.sent_date.isoformat()
        }


class InvoiceGenerated(DomainEvent):
    """Event fired when a draft invoice is created from a project's payments."""

    def __init__(self,
                 invoice_id: str,
                 invoice_number: str,
                 project_id: str,
                 amount: float,
                 **kwargs):
        super().__init__(**kwargs)
        self.invoice_id = invoice_id
        self.invoice_number = invoice_number
        self.project_id = project_id
        self.amount = amount

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "invoice_id": self.invoice_id,
            "invoice_number": self.invoice_number,
            "project_id": self.project_id,
            "amount": self.amount
        }
