"""
Unit tests for the SQLAlchemy backing store on in-memory SQLite.
"""

import pytest

from backoffice.domain.models.base import StoreError, MultipleRowsError
from backoffice.domain.repositories.store import eq, neq, like, not_like, in_
from backoffice.infrastructure.db.database import create_engine, create_all_tables
from backoffice.infrastructure.stores.sqlalchemy_store import SQLAlchemyStore


async def make_store() -> SQLAlchemyStore:
    engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_all_tables(engine)
    return SQLAlchemyStore(engine)


async def add_project(store: SQLAlchemyStore, name: str = "Site") -> dict:
    [project] = await store.insert("projects", {"name": name, "status": "active"})
    return project


class TestSQLAlchemyStore:
    """Test cases for SQLAlchemyStore."""

    @pytest.mark.asyncio
    async def test_insert_and_select(self):
        store = await make_store()
        try:
            rows = await store.insert("clients", [{"name": "Bravo"}, {"name": "Alpha"}])

            assert len(rows) == 2
            assert all(row["id"] and row["created_at"] for row in rows)
            assert [row["name"] for row in rows] == ["Bravo", "Alpha"]

            ordered = await store.select("clients", order_by="name", columns=["id", "name"])
            assert [row["name"] for row in ordered] == ["Alpha", "Bravo"]
            assert set(ordered[0].keys()) == {"id", "name"}
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_platform_filters(self):
        store = await make_store()
        try:
            project = await add_project(store)
            await store.insert("project_credentials", [
                {"project_id": project["id"], "platform": "main", "username": "a"},
                {"project_id": project["id"], "platform": "hosting-aws", "username": "b"},
                {"project_id": project["id"], "platform": "ftp-server1", "username": "c"},
            ])

            others = await store.select("project_credentials", [
                eq("project_id", project["id"]),
                neq("platform", "main"),
                not_like("platform", "hosting-%"),
            ])
            hosting = await store.select("project_credentials", [like("platform", "hosting-%")])
            picked = await store.select("project_credentials", [in_("username", ["a", "c"])])

            assert [row["platform"] for row in others] == ["ftp-server1"]
            assert [row["username"] for row in hosting] == ["b"]
            assert sorted(row["username"] for row in picked) == ["a", "c"]
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_update_and_delete(self):
        store = await make_store()
        try:
            project = await add_project(store)
            await store.insert("payments", [
                {"project_id": project["id"], "amount": 100, "payment_date": "2024-01-01"},
                {"project_id": project["id"], "amount": 200, "payment_date": "2024-02-01"},
            ])

            updated = await store.update("projects", {"budget": 1500}, [eq("id", project["id"])])
            assert updated[0]["budget"] == 1500.0

            assert await store.update("projects", {"budget": 1}, [eq("id", "missing")]) == []
            assert await store.delete("payments", [eq("project_id", project["id"])]) == 2
            assert await store.select("payments") == []
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_maybe_single(self):
        store = await make_store()
        try:
            await store.insert("clients", [{"name": "Acme"}, {"name": "Acme"}])

            assert await store.maybe_single("clients", [eq("name", "Nobody")]) is None
            with pytest.raises(MultipleRowsError):
                await store.maybe_single("clients", [eq("name", "Acme")])
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_unknown_column_and_table(self):
        store = await make_store()
        try:
            with pytest.raises(StoreError) as exc_info:
                await store.insert("projects", {"name": "Site", "colour": "red"})
            assert exc_info.value.is_missing_column

            with pytest.raises(StoreError) as exc_info:
                await store.select("widgets")
            assert 'relation "widgets" does not exist' in exc_info.value.message
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_database_errors_become_store_errors(self):
        store = await make_store()
        try:
            with pytest.raises(StoreError):
                await store.insert("projects", {"status": "active"})
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_transaction_rolls_back(self):
        store = await make_store()
        try:
            with pytest.raises(StoreError):
                async with store.transaction():
                    project = await add_project(store)
                    await store.insert("payments", {"project_id": project["id"], "amount": None,
                                                    "payment_date": "2024-01-01"})

            assert await store.select("projects") == []
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_transaction_commits(self):
        store = await make_store()
        try:
            async with store.transaction():
                project = await add_project(store)
                await store.insert("payments", {"project_id": project["id"], "amount": 10,
                                                "payment_date": "2024-01-01"})

            assert len(await store.select("projects")) == 1
            assert len(await store.select("payments")) == 1
        finally:
            await store.close()
