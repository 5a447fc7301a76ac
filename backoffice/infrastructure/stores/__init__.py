"""
Backing store implementations and the startup factory.
"""

import logging
from typing import Optional

from backoffice.config import Settings, settings as default_settings
from backoffice.domain.repositories.store import BackingStore
from backoffice.infrastructure.db import create_engine, create_all_tables, check_and_update_projects_schema
from .memory_store import InMemoryStore, DEMO_CLIENTS
from .sqlalchemy_store import SQLAlchemyStore


logger = logging.getLogger(__name__)


def build_store(config: Optional[Settings] = None) -> BackingStore:
    """Create the store selected by ``store_backend``."""
    config = config or default_settings

    if config.store_backend == "sqlalchemy":
        config.validate_environment()
        engine = create_engine(config.database_url_async, echo=config.debug)
        logger.info("Using relational backing store")
        return SQLAlchemyStore(engine)

    logger.info("Using in-memory backing store")
    if config.seed_demo_data:
        return InMemoryStore.with_demo_data()
    return InMemoryStore()


async def prepare_store(store: BackingStore, config: Optional[Settings] = None) -> None:
    """Create missing tables and bring the projects table up to date."""
    config = config or default_settings
    if not isinstance(store, SQLAlchemyStore):
        return

    await create_all_tables(store.engine)
    if config.check_schema_on_startup:
        if not await check_and_update_projects_schema(store.engine):
            logger.warning("Projects table schema could not be verified")


__all__ = [
    "InMemoryStore",
    "SQLAlchemyStore",
    "DEMO_CLIENTS",
    "build_store",
    "prepare_store",
]
