"""
Schema check for the projects table.
Older databases were created before the ``url`` and ``original_status``
columns existed; this adds them in place.
"""

import logging
from typing import Dict, Set

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine


logger = logging.getLogger(__name__)


# column name -> DDL fragment appended after ADD COLUMN
REQUIRED_PROJECT_COLUMNS: Dict[str, str] = {
    "url": "url TEXT DEFAULT ''",
    "original_status": "original_status VARCHAR(50)",
}


async def get_table_columns(engine: AsyncEngine, table: str) -> Set[str]:
    """Column names of an existing table (empty if it does not exist)."""
    def _inspect(sync_conn) -> Set[str]:
        inspector = inspect(sync_conn)
        if not inspector.has_table(table):
            return set()
        return {column["name"] for column in inspector.get_columns(table)}

    async with engine.connect() as conn:
        return await conn.run_sync(_inspect)


async def check_and_update_projects_schema(engine: AsyncEngine) -> bool:
    """
    Make sure the projects table has the url and original_status columns.

    Returns:
        True when the schema is up to date afterwards, False on failure
    """
    try:
        existing = await get_table_columns(engine, "projects")
        if not existing:
            logger.error("Projects table does not exist")
            return False

        missing = [name for name in REQUIRED_PROJECT_COLUMNS if name not in existing]
        if not missing:
            return True

        async with engine.begin() as conn:
            for name in missing:
                logger.info(f"Adding missing column projects.{name}")
                await conn.execute(text(f"ALTER TABLE projects ADD COLUMN {REQUIRED_PROJECT_COLUMNS[name]}"))
                if name == "original_status":
                    await conn.execute(text("UPDATE projects SET original_status = status"))

        return True

    except SQLAlchemyError as e:
        logger.error(f"Schema update error: {str(e)}")
        return False
