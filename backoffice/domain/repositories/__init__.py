"""
Repository interfaces for the domain layer.
This module exports the store port and repository interfaces for dependency injection.
"""

from .store import BackingStore, Filter, FilterOp, Row, eq, neq, like, not_like, in_
from .project_repository import ProjectRepository
from .project_type_repository import ProjectTypeRepository
from .invoice_repository import InvoiceRepository
from .client_repository import ClientRepository, CompanyRepository

__all__ = [
    "BackingStore",
    "Filter",
    "FilterOp",
    "Row",
    "eq",
    "neq",
    "like",
    "not_like",
    "in_",
    "ProjectRepository",
    "ProjectTypeRepository",
    "InvoiceRepository",
    "ClientRepository",
    "CompanyRepository",
]
