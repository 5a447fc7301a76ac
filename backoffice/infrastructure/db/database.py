"""
Database configuration and engine management.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from backoffice.config import settings
from backoffice.infrastructure.db.models import metadata


_engine: Optional[AsyncEngine] = None


def create_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine.
    In-memory SQLite databases share one connection so every session sees
    the same data.
    """
    url = url or settings.database_url_async
    if not url:
        raise ValueError("DATABASE_URL is not configured")

    echo = settings.debug if echo is None else echo
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo, poolclass=NullPool)


def get_engine() -> AsyncEngine:
    """Process-wide engine built from settings."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
