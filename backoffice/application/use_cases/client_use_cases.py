"""
Client and company use cases for the application layer.
Reads report failures as a notification and return an empty result; writes
report and re-raise.
"""

import logging
from typing import List, Optional

from backoffice.domain.events.base import publish_event
from backoffice.domain.events.client_events import ClientCreated
from backoffice.domain.models.client import Client, Company
from backoffice.domain.repositories.client_repository import ClientRepository, CompanyRepository
from .base_use_case import notify_failure, failure_description


logger = logging.getLogger(__name__)


class ListClientsUseCase:
    """List clients by name, optionally only those of one company."""

    def __init__(self, client_repository: ClientRepository):
        self.client_repository = client_repository

    async def execute(self, company_id: Optional[str] = None) -> List[Client]:
        try:
            if company_id:
                return await self.client_repository.get_clients_by_company(company_id)
            return await self.client_repository.get_clients()
        except Exception as e:
            logger.error(f"Error fetching clients: {str(e)}")
            if company_id:
                await notify_failure("Error", "Failed to fetch company clients. Please try again.")
            else:
                await notify_failure("Error", "Failed to fetch clients. Please try again.")
            return []


class GetClientUseCase:

    def __init__(self, client_repository: ClientRepository):
        self.client_repository = client_repository

    async def execute(self, client_id: str) -> Optional[Client]:
        try:
            return await self.client_repository.get_client_by_id(client_id)
        except Exception as e:
            logger.error(f"Error fetching client {client_id}: {str(e)}")
            await notify_failure("Error", "Failed to fetch client details. Please try again.")
            return None


class CreateClientUseCase:
    """Add a client and announce it."""

    def __init__(self, client_repository: ClientRepository):
        self.client_repository = client_repository

    async def execute(self, client: Client) -> Client:
        try:
            created = await self.client_repository.add_client(client)
        except Exception as e:
            logger.error(f"Error adding client: {str(e)}")
            await notify_failure("Error", failure_description(e, "Failed to add client. Please try again."))
            raise

        await publish_event(ClientCreated(
            client_id=created.id,
            client_name=created.name,
            company_id=created.company_id
        ))
        return created


class ListCompaniesUseCase:

    def __init__(self, company_repository: CompanyRepository):
        self.company_repository = company_repository

    async def execute(self) -> List[Company]:
        try:
            return await self.company_repository.get_companies()
        except Exception as e:
            logger.error(f"Error fetching companies: {str(e)}")
            await notify_failure("Error", "Failed to fetch companies. Please try again.")
            return []


class SaveCompanyUseCase:
    """Create a company, or rename one when an id is given."""

    def __init__(self, company_repository: CompanyRepository):
        self.company_repository = company_repository

    async def execute(self, name: str, company_id: Optional[str] = None) -> Company:
        try:
            if company_id:
                return await self.company_repository.update_company(company_id, name)
            return await self.company_repository.add_company(name)
        except Exception as e:
            action = "update" if company_id else "create"
            logger.error(f"Error trying to {action} company: {str(e)}")
            await notify_failure(
                "Error", failure_description(e, f"Failed to {action} company. Please try again.")
            )
            raise


class DeleteCompanyUseCase:
    """Delete a company that no client belongs to."""

    def __init__(self, company_repository: CompanyRepository):
        self.company_repository = company_repository

    async def execute(self, company_id: str) -> bool:
        try:
            return await self.company_repository.delete_company(company_id)
        except Exception as e:
            logger.error(f"Error deleting company {company_id}: {str(e)}")
            await notify_failure(
                "Error", failure_description(e, "Failed to delete company. Please try again.")
            )
            raise
