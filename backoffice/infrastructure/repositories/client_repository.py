"""
Client repository implementation on a BackingStore.
"""

import logging
from typing import List, Optional

from backoffice.domain.models.base import ValidationError
from backoffice.domain.models.client import Client
from backoffice.domain.repositories.client_repository import ClientRepository
from backoffice.domain.repositories.store import BackingStore, eq
from backoffice.infrastructure.mappers.client_mapper import ClientMapper


logger = logging.getLogger(__name__)


class StoreClientRepository(ClientRepository):
    """Clients over a backing store."""

    def __init__(self, store: BackingStore):
        self.store = store
        self.mapper = ClientMapper()

    async def get_clients(self) -> List[Client]:
        rows = await self.store.select("clients", order_by="name")
        return [self.mapper.row_to_domain(row) for row in rows]

    async def get_clients_by_company(self, company_id: str) -> List[Client]:
        rows = await self.store.select("clients", [eq("company_id", company_id)], order_by="name")
        return [self.mapper.row_to_domain(row) for row in rows]

    async def get_client_by_id(self, client_id: str) -> Optional[Client]:
        row = await self.store.maybe_single("clients", [eq("id", client_id)])
        return self.mapper.row_to_domain(row) if row else None

    async def add_client(self, client: Client) -> Client:
        client.validate()
        if client.company_id:
            company = await self.store.maybe_single("companies", [eq("id", client.company_id)])
            if not company:
                raise ValidationError(f"Company {client.company_id} does not exist", "company_id")

        rows = await self.store.insert("clients", self.mapper.to_insert_row(client))
        logger.info(f"Added client {rows[0]['id']} ({rows[0]['name']})")
        return self.mapper.row_to_domain(rows[0])
