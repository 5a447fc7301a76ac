"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from backoffice.config import Settings, DEFAULT_CORS_ORIGINS
from backoffice.infrastructure.stores import build_store, InMemoryStore


class TestSettings:
    """Test cases for Settings."""

    def test_cors_origins_from_comma_separated_string(self):
        config = Settings(cors_origins="https://app.acmecorp.com, http://localhost:3000")
        assert config.cors_origins == ["https://app.acmecorp.com", "http://localhost:3000"]

    def test_blank_cors_origins_use_defaults(self):
        assert Settings(cors_origins="  ").cors_origins == DEFAULT_CORS_ORIGINS

    @pytest.mark.parametrize("url, expected", [
        ("postgresql://u:p@db/agency", "postgresql+asyncpg://u:p@db/agency"),
        ("sqlite:///./agency.db", "sqlite+aiosqlite:///./agency.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ])
    def test_database_url_async(self, url, expected):
        assert Settings(database_url=url).database_url_async == expected

    def test_store_backend_is_normalized(self):
        assert Settings(store_backend=" SQLAlchemy ").store_backend == "sqlalchemy"

    def test_unknown_store_backend(self):
        with pytest.raises(ValidationError):
            Settings(store_backend="redis")

    def test_relational_store_needs_a_url(self):
        config = Settings(store_backend="sqlalchemy", database_url=None)
        with pytest.raises(ValueError):
            config.validate_environment()


class TestBuildStore:
    """Test cases for the store factory."""

    @pytest.mark.asyncio
    async def test_memory_store_with_demo_clients(self):
        store = build_store(Settings(store_backend="memory", seed_demo_data=True))

        assert isinstance(store, InMemoryStore)
        assert len(await store.select("clients")) == 3

    @pytest.mark.asyncio
    async def test_empty_memory_store(self):
        store = build_store(Settings(store_backend="memory", seed_demo_data=False))
        assert await store.select("clients") == []
