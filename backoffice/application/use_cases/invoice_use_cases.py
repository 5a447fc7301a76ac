"""
Invoice use cases for the application layer.
"""

import logging
from datetime import date
from typing import List, Optional

from backoffice.application.dto.invoice_dto import SendInvoiceRequestDTO
from backoffice.domain.events.base import publish_event
from backoffice.domain.events.invoice_events import InvoiceSent, InvoiceGenerated
from backoffice.domain.models.base import EntityNotFoundError, utcnow
from backoffice.domain.models.invoice import Invoice, InvoiceStatus
from backoffice.domain.repositories.invoice_repository import InvoiceRepository
from backoffice.infrastructure.email.email_service import EmailService
from .base_use_case import BaseUseCase, UseCaseResult


logger = logging.getLogger(__name__)


class SendInvoiceUseCase(BaseUseCase[SendInvoiceRequestDTO, None]):
    """
    Email an invoice to the client and mark it as sent.
    The sent date is overwritten on every send.
    """

    def __init__(self, invoice_repository: InvoiceRepository, email_service: EmailService):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.email_service = email_service

    async def _execute_business_logic(self, request: SendInvoiceRequestDTO) -> UseCaseResult[None]:
        invoice = await self.invoice_repository.get_invoice_by_id(request.invoice_id)
        if not invoice:
            raise EntityNotFoundError("Invoice", request.invoice_id)

        result = await self.email_service.send_invoice_notification(
            client_email=request.client_email,
            client_name=request.client_name,
            project_name=request.project_name,
            invoice=invoice
        )
        if not result.get("success"):
            return UseCaseResult.error_result(
                result.get("error") or "Failed to send invoice",
                "EMAIL_FAILED"
            )

        sent_date = utcnow()
        await self.invoice_repository.mark_sent(invoice.id, sent_date)

        await publish_event(InvoiceSent(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            client_email=request.client_email,
            sent_date=sent_date
        ))

        logger.info(f"Invoice {invoice.invoice_number} sent to {request.client_email}")
        return UseCaseResult.success_result(
            message=f"Invoice {invoice.invoice_number} sent to {request.client_email}"
        )


class GetProjectInvoicesUseCase:
    """List the invoices of a project, newest first."""

    def __init__(self, invoice_repository: InvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(self, project_id: str) -> List[Invoice]:
        return await self.invoice_repository.get_project_invoices(project_id)


class UpdateInvoiceStatusUseCase:
    """Change the status of an invoice and return it re-read."""

    def __init__(self, invoice_repository: InvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(
        self,
        invoice_id: str,
        status: InvoiceStatus,
        notes: Optional[str] = None
    ) -> Invoice:
        await self.invoice_repository.update_invoice_status(invoice_id, status, notes)
        return await self.invoice_repository.get_invoice_by_id(invoice_id)


class GenerateInvoiceUseCase:
    """Create a draft invoice from the payments of a project."""

    def __init__(self, invoice_repository: InvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(self, project_id: str, issue_date: Optional[date] = None) -> Invoice:
        try:
            invoice = await self.invoice_repository.generate_invoice(project_id, issue_date)
        except Exception as e:
            logger.error(f"Error generating invoice for project {project_id}: {str(e)}")
            raise

        await publish_event(InvoiceGenerated(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            project_id=project_id,
            amount=invoice.amount
        ))
        return invoice
