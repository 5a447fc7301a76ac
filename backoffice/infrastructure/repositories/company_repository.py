"""
Company repository implementation on a BackingStore.
A company can only be deleted once no client refers to it.
"""

import logging
from typing import List, Optional

from backoffice.domain.models.base import BusinessRuleViolation, EntityNotFoundError
from backoffice.domain.models.client import Company
from backoffice.domain.repositories.client_repository import CompanyRepository
from backoffice.domain.repositories.store import BackingStore, eq
from backoffice.infrastructure.mappers.client_mapper import ClientMapper


logger = logging.getLogger(__name__)

COMPANY_HAS_CLIENTS = (
    "Cannot delete company with existing clients. "
    "Please reassign or delete the clients first."
)


class StoreCompanyRepository(CompanyRepository):
    """Companies over a backing store."""

    def __init__(self, store: BackingStore):
        self.store = store
        self.mapper = ClientMapper()

    async def get_companies(self) -> List[Company]:
        rows = await self.store.select("companies", order_by="name")
        return [self.mapper.company_row_to_domain(row) for row in rows]

    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        row = await self.store.maybe_single("companies", [eq("id", company_id)])
        return self.mapper.company_row_to_domain(row) if row else None

    async def add_company(self, name: str) -> Company:
        Company(name=name).validate()
        rows = await self.store.insert("companies", {"name": name.strip()})
        logger.info(f"Added company {rows[0]['id']} ({rows[0]['name']})")
        return self.mapper.company_row_to_domain(rows[0])

    async def update_company(self, company_id: str, name: str) -> Company:
        Company(name=name).validate()
        rows = await self.store.update("companies", {"name": name.strip()}, [eq("id", company_id)])
        if not rows:
            raise EntityNotFoundError("Company", company_id)
        return self.mapper.company_row_to_domain(rows[0])

    async def delete_company(self, company_id: str) -> bool:
        async with self.store.transaction():
            clients = await self.store.select("clients", [eq("company_id", company_id)], columns=["id"])
            if clients:
                raise BusinessRuleViolation(COMPANY_HAS_CLIENTS)
            deleted = await self.store.delete("companies", [eq("id", company_id)])
        if deleted:
            logger.info(f"Deleted company {company_id}")
        return deleted > 0
