"""
Unit tests for project types and categories.
"""

import pytest

from backoffice.domain.models.base import ValidationError, EntityNotFoundError
from backoffice.infrastructure.repositories.project_type_repository import StoreProjectTypeRepository
from backoffice.infrastructure.stores.memory_store import InMemoryStore


MISSING_ID = "0b9f2f3e-1c2d-4e5f-8a9b-0c1d2e3f4a5b"


class TestProjectTypeRepository:
    """Test cases for StoreProjectTypeRepository."""

    def setup_method(self):
        self.store = InMemoryStore()
        self.repository = StoreProjectTypeRepository(self.store)

    @pytest.mark.asyncio
    async def test_seed_catalogue_when_store_is_empty(self):
        types = await self.repository.get_project_types()
        categories = await self.repository.get_project_categories()

        assert [t.name for t in types] == ["Custom Development", "Shopify", "WordPress"]
        assert len(categories) == 7

    @pytest.mark.asyncio
    async def test_seed_categories_by_type(self):
        categories = await self.repository.get_categories_by_type("type-1")

        assert [c.name for c in categories] == ["Blog", "E-commerce", "Landing Page"]

    @pytest.mark.asyncio
    async def test_invalid_type_has_no_categories(self):
        assert await self.repository.get_categories_by_type("nonsense") == []

    @pytest.mark.asyncio
    async def test_seed_lookups_do_not_touch_the_store(self):
        repository = StoreProjectTypeRepository(store=None)

        assert (await repository.get_project_type_by_id("type-3")).name == "Custom Development"
        assert (await repository.get_project_category_by_id("cat-5")).name == "Dropshipping"
        assert await repository.get_project_type_by_id("bogus") is None

    @pytest.mark.asyncio
    async def test_stored_types_replace_the_catalogue(self):
        created = await self.repository.add_project_type("  Webflow ")

        types = await self.repository.get_project_types()

        assert created.name == "Webflow"
        assert [t.name for t in types] == ["Webflow"]
        assert (await self.repository.get_project_type_by_id(created.id)).name == "Webflow"

    @pytest.mark.asyncio
    async def test_category_lifecycle(self):
        project_type = await self.repository.add_project_type("Webflow")
        category = await self.repository.add_project_category("Portfolio", project_type.id)

        renamed = await self.repository.update_project_category(category.id, "Agency", project_type.id)
        by_type = await self.repository.get_categories_by_type(project_type.id)

        assert renamed.name == "Agency"
        assert [c.name for c in by_type] == ["Agency"]
        assert await self.repository.delete_project_category(category.id) is True
        assert await self.repository.get_categories_by_type(project_type.id) == []

    @pytest.mark.asyncio
    async def test_delete_type_removes_its_categories(self):
        project_type = await self.repository.add_project_type("Webflow")
        await self.repository.add_project_category("Portfolio", project_type.id)
        await self.repository.add_project_category("Shop", project_type.id)

        assert await self.repository.delete_project_type(project_type.id) is True
        assert self.store.dump("project_categories") == []
        assert self.store.dump("project_types") == []

    @pytest.mark.asyncio
    async def test_seed_entries_are_read_only(self):
        with pytest.raises(ValidationError):
            await self.repository.update_project_type("type-1", "Renamed")
        with pytest.raises(ValidationError):
            await self.repository.delete_project_category("cat-1")
        with pytest.raises(ValidationError):
            await self.repository.add_project_category("Portfolio", "type-1")

    @pytest.mark.asyncio
    async def test_validation(self):
        with pytest.raises(ValidationError):
            await self.repository.add_project_type("   ")
        with pytest.raises(ValidationError):
            await self.repository.update_project_type("abc", "Name")

    @pytest.mark.asyncio
    async def test_update_missing_type(self):
        with pytest.raises(EntityNotFoundError):
            await self.repository.update_project_type(MISSING_ID, "Name")
        assert await self.repository.delete_project_type(MISSING_ID) is False
