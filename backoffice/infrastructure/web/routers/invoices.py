"""
Invoice router.
Sends invoices to clients and tracks their status.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backoffice.application.dto.base_dto import MessageResponseDTO
from backoffice.application.dto.invoice_dto import (
    SendInvoiceRequestDTO, SendInvoiceResponseDTO, UpdateInvoiceStatusRequestDTO, InvoiceResponseDTO
)
from backoffice.application.use_cases.invoice_use_cases import SendInvoiceUseCase, UpdateInvoiceStatusUseCase
from backoffice.infrastructure.email.email_service import EmailService
from backoffice.infrastructure.repositories import StoreInvoiceRepository
from backoffice.infrastructure.web.dependencies import get_invoice_repository, get_email


router = APIRouter()

Repository = Annotated[StoreInvoiceRepository, Depends(get_invoice_repository)]


@router.post("/send", response_model=SendInvoiceResponseDTO)
async def send_invoice(
    request: SendInvoiceRequestDTO,
    repository: Repository,
    email_service: Annotated[EmailService, Depends(get_email)]
):
    """
    Email an invoice to the client and mark it as sent.

    - **invoice_id**: Invoice to send
    - **client_email**: Recipient address
    - **client_name** / **project_name**: Used in the message
    """
    result = await SendInvoiceUseCase(repository, email_service).execute(request)
    return SendInvoiceResponseDTO(success=result.success, message=result.message, error=result.error)


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(invoice_id: str, repository: Repository):
    invoice = await repository.get_invoice_by_id(invoice_id)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Invoice {invoice_id} not found"
        )
    return InvoiceResponseDTO.from_domain(invoice)


@router.patch("/{invoice_id}/status", response_model=InvoiceResponseDTO)
async def update_invoice_status(
    invoice_id: str,
    request: UpdateInvoiceStatusRequestDTO,
    repository: Repository
):
    invoice = await UpdateInvoiceStatusUseCase(repository).execute(invoice_id, request.status, request.notes)
    return InvoiceResponseDTO.from_domain(invoice)


@router.delete("/{invoice_id}", response_model=MessageResponseDTO)
async def delete_invoice(invoice_id: str, repository: Repository):
    await repository.delete_invoice(invoice_id)
    return MessageResponseDTO(message="Invoice deleted")
