"""
Repository implementations over the backing store.
"""

from .project_repository import StoreProjectRepository
from .project_type_repository import StoreProjectTypeRepository
from .invoice_repository import StoreInvoiceRepository
from .client_repository import StoreClientRepository
from .company_repository import StoreCompanyRepository

__all__ = [
    "StoreProjectRepository",
    "StoreProjectTypeRepository",
    "StoreInvoiceRepository",
    "StoreClientRepository",
    "StoreCompanyRepository",
]
