"""
Client and company repository interfaces.
Defines the contract for client and company persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from backoffice.domain.models.client import Client, Company


class ClientRepository(ABC):
    """Repository interface for clients."""

    @abstractmethod
    async def get_clients(self) -> List[Client]:
        """All clients ordered by name."""
        pass

    @abstractmethod
    async def get_clients_by_company(self, company_id: str) -> List[Client]:
        """Clients of one company ordered by name."""
        pass

    @abstractmethod
    async def get_client_by_id(self, client_id: str) -> Optional[Client]:
        """
        Find a client by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def add_client(self, client: Client) -> Client:
        """
        Store a new client and return it with its id.

        Raises:
            ValidationError: name missing or unknown company
        """
        pass


class CompanyRepository(ABC):
    """Repository interface for companies."""

    @abstractmethod
    async def get_companies(self) -> List[Company]:
        """All companies ordered by name."""
        pass

    @abstractmethod
    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        pass

    @abstractmethod
    async def add_company(self, name: str) -> Company:
        pass

    @abstractmethod
    async def update_company(self, company_id: str, name: str) -> Company:
        pass

    @abstractmethod
    async def delete_company(self, company_id: str) -> bool:
        """
        Delete a company that has no clients.
        Returns False when there was nothing to delete.

        Raises:
            BusinessRuleViolation: clients still belong to the company
        """
        pass
