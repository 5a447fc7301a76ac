"""
Unit tests for the projects schema check.
"""

import pytest
from sqlalchemy import text

from backoffice.infrastructure.db.database import create_engine, create_all_tables
from backoffice.infrastructure.db.migrations import check_and_update_projects_schema, get_table_columns


class TestProjectsSchemaCheck:
    """Test cases for check_and_update_projects_schema."""

    @pytest.mark.asyncio
    async def test_adds_missing_columns(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
        try:
            async with engine.begin() as conn:
                await conn.execute(text(
                    "CREATE TABLE projects (id VARCHAR(36) PRIMARY KEY, name VARCHAR(255), status VARCHAR(20))"
                ))
                await conn.execute(text("INSERT INTO projects (id, name, status) VALUES ('p1', 'Old', 'completed')"))

            assert await check_and_update_projects_schema(engine) is True

            columns = await get_table_columns(engine, "projects")
            assert {"url", "original_status"} <= columns

            async with engine.connect() as conn:
                result = await conn.execute(text("SELECT url, original_status FROM projects"))
                assert result.one() == ("", "completed")
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_current_schema_is_left_alone(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
        try:
            await create_all_tables(engine)
            assert await check_and_update_projects_schema(engine) is True
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_missing_table(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
        try:
            assert await check_and_update_projects_schema(engine) is False
        finally:
            await engine.dispose()
