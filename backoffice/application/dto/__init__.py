"""
Data Transfer Objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, MessageResponseDTO
from .project_dto import (
    CredentialDTO, HostingDTO, OtherAccessRequestDTO, OtherAccessResponseDTO, PaymentDTO,
    ProjectRequestDTO, CreateProjectRequestDTO, UpdateProjectRequestDTO, ProjectResponseDTO,
    ProjectTypeRequestDTO, ProjectCategoryRequestDTO,
    ProjectTypeResponseDTO, ProjectCategoryResponseDTO,
)
from .invoice_dto import (
    SendInvoiceRequestDTO, SendInvoiceResponseDTO, UpdateInvoiceStatusRequestDTO,
    InvoiceResponseDTO, InvoiceItemResponseDTO
)
from .client_dto import CreateClientRequestDTO, ClientResponseDTO, CompanyRequestDTO, CompanyResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "MessageResponseDTO",
    "CredentialDTO",
    "HostingDTO",
    "OtherAccessRequestDTO",
    "OtherAccessResponseDTO",
    "PaymentDTO",
    "ProjectRequestDTO",
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "ProjectResponseDTO",
    "ProjectTypeRequestDTO",
    "ProjectCategoryRequestDTO",
    "ProjectTypeResponseDTO",
    "ProjectCategoryResponseDTO",
    "SendInvoiceRequestDTO",
    "SendInvoiceResponseDTO",
    "UpdateInvoiceStatusRequestDTO",
    "InvoiceResponseDTO",
    "InvoiceItemResponseDTO",
    "CreateClientRequestDTO",
    "ClientResponseDTO",
    "CompanyRequestDTO",
    "CompanyResponseDTO",
]
