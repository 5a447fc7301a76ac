"""
Unit tests for the client and company repositories.
"""

import pytest

from backoffice.domain.models.base import BusinessRuleViolation, EntityNotFoundError, ValidationError
from backoffice.domain.models.client import Client
from backoffice.infrastructure.repositories.client_repository import StoreClientRepository
from backoffice.infrastructure.repositories.company_repository import StoreCompanyRepository
from backoffice.infrastructure.stores.memory_store import InMemoryStore, DEMO_CLIENTS


class TestClientRepository:
    """Test cases for StoreClientRepository."""

    def setup_method(self):
        self.store = InMemoryStore(seed={"clients": list(reversed(DEMO_CLIENTS))})
        self.repository = StoreClientRepository(self.store)

    @pytest.mark.asyncio
    async def test_clients_by_name(self):
        clients = await self.repository.get_clients()

        assert [c.name for c in clients] == ["Acme Corp", "Globex Ltd", "Initech"]
        assert clients[0].email == "billing@acme.example"

    @pytest.mark.asyncio
    async def test_get_client_by_id(self):
        client = await self.repository.get_client_by_id(DEMO_CLIENTS[1]["id"])

        assert client.name == "Globex Ltd"
        assert await self.repository.get_client_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_add_client_stores_blank_fields_as_null(self):
        client = await self.repository.add_client(
            Client(name=" Umbrella Inc ", email="ap@umbrella.com", phone="  ", country="US")
        )

        assert client.id
        [row] = [r for r in self.store.dump("clients") if r["id"] == client.id]
        assert row["name"] == "Umbrella Inc"
        assert row["phone"] is None
        assert row["country"] == "US"

    @pytest.mark.asyncio
    async def test_add_client_without_name(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.repository.add_client(Client(name=""))

        assert exc_info.value.field == "name"
        assert len(self.store.dump("clients")) == 3

    @pytest.mark.asyncio
    async def test_company_must_exist(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.repository.add_client(Client(name="Umbrella Inc", company_id="missing"))

        assert exc_info.value.field == "company_id"
        assert len(self.store.dump("clients")) == 3

    @pytest.mark.asyncio
    async def test_clients_of_a_company(self):
        [company] = await self.store.insert("companies", {"name": "Acme Holdings"})
        await self.repository.add_client(Client(name="Wile E. Coyote", company_id=company["id"]))
        await self.repository.add_client(Client(name="Road Runner", company_id=company["id"]))

        clients = await self.repository.get_clients_by_company(company["id"])

        assert [c.name for c in clients] == ["Road Runner", "Wile E. Coyote"]
        assert all(c.company_id == company["id"] for c in clients)
        assert await self.repository.get_clients_by_company("other") == []


class TestCompanyRepository:
    """Test cases for StoreCompanyRepository."""

    def setup_method(self):
        self.store = InMemoryStore()
        self.repository = StoreCompanyRepository(self.store)
        self.clients = StoreClientRepository(self.store)

    @pytest.mark.asyncio
    async def test_create_list_and_rename(self):
        stark = await self.repository.add_company("Stark Industries")
        await self.repository.add_company(" Acme Holdings ")

        renamed = await self.repository.update_company(stark.id, "Stark Enterprises")

        assert renamed.name == "Stark Enterprises"
        assert [c.name for c in await self.repository.get_companies()] == ["Acme Holdings", "Stark Enterprises"]
        assert (await self.repository.get_company_by_id(stark.id)).name == "Stark Enterprises"
        assert await self.repository.get_company_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_name_is_required(self):
        with pytest.raises(ValidationError):
            await self.repository.add_company("")

        company = await self.repository.add_company("Acme Holdings")
        with pytest.raises(ValidationError):
            await self.repository.update_company(company.id, "  ")

    @pytest.mark.asyncio
    async def test_update_missing_company(self):
        with pytest.raises(EntityNotFoundError):
            await self.repository.update_company("missing", "Anything")

    @pytest.mark.asyncio
    async def test_delete_is_refused_while_clients_remain(self):
        company = await self.repository.add_company("Acme Holdings")
        await self.clients.add_client(Client(name="Wile E. Coyote", company_id=company.id))

        with pytest.raises(BusinessRuleViolation) as exc_info:
            await self.repository.delete_company(company.id)

        assert exc_info.value.message == (
            "Cannot delete company with existing clients. "
            "Please reassign or delete the clients first."
        )
        assert len(self.store.dump("companies")) == 1

    @pytest.mark.asyncio
    async def test_delete(self):
        company = await self.repository.add_company("Acme Holdings")

        assert await self.repository.delete_company(company.id) is True
        assert await self.repository.delete_company(company.id) is False
        assert self.store.dump("companies") == []
