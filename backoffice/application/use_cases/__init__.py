"""
Application layer use cases.
"""

from .base_use_case import BaseUseCase, UseCaseResult, notify_failure, failure_description
from .project_use_cases import (
    ListProjectsUseCase,
    GetProjectUseCase,
    CreateProjectUseCase,
    UpdateProjectUseCase,
    ListProjectTypesUseCase,
    ListProjectCategoriesUseCase,
)
from .invoice_use_cases import (
    SendInvoiceUseCase,
    GetProjectInvoicesUseCase,
    UpdateInvoiceStatusUseCase,
    GenerateInvoiceUseCase,
)
from .client_use_cases import (
    ListClientsUseCase,
    GetClientUseCase,
    CreateClientUseCase,
    ListCompaniesUseCase,
    SaveCompanyUseCase,
    DeleteCompanyUseCase,
)

__all__ = [
    "BaseUseCase",
    "UseCaseResult",
    "notify_failure",
    "failure_description",
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "ListProjectTypesUseCase",
    "ListProjectCategoriesUseCase",
    "SendInvoiceUseCase",
    "GetProjectInvoicesUseCase",
    "UpdateInvoiceStatusUseCase",
    "GenerateInvoiceUseCase",
    "ListClientsUseCase",
    "GetClientUseCase",
    "CreateClientUseCase",
    "ListCompaniesUseCase",
    "SaveCompanyUseCase",
    "DeleteCompanyUseCase",
]
