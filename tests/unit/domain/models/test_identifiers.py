"""
Unit tests for identifier classification.
"""

from backoffice.domain.models.identifiers import (
    IdKind, PersistedId, SeedId, InvalidId, classify_id, is_persisted_id, store_key
)


UUID = "123e4567-e89b-12d3-a456-426614174000"


class TestClassifyId:
    """Test cases for classify_id."""

    def test_seed_ids(self):
        assert classify_id("type-1") == SeedId("type-1")
        assert classify_id("cat-7") == SeedId("cat-7")

    def test_persisted_id(self):
        assert classify_id(UUID) == PersistedId(UUID)
        assert classify_id(UUID.upper()) == PersistedId(UUID.upper())

    def test_invalid_ids(self):
        assert classify_id("abc") == InvalidId("abc")
        assert classify_id("123") == InvalidId("123")
        assert isinstance(classify_id(None), InvalidId)
        assert isinstance(classify_id(""), InvalidId)

    def test_kind_restricts_seed_prefix(self):
        assert classify_id("type-1", IdKind.PROJECT_TYPE) == SeedId("type-1")
        assert classify_id("cat-1", IdKind.PROJECT_TYPE) == InvalidId("cat-1")
        assert classify_id("cat-1", IdKind.PROJECT_CATEGORY) == SeedId("cat-1")

    def test_uuid_is_persisted_for_any_kind(self):
        assert classify_id(UUID, IdKind.PROJECT_CATEGORY) == PersistedId(UUID)


class TestStoreKey:
    """Only persisted ids are written to foreign-key columns."""

    def test_store_key(self):
        assert store_key(PersistedId(UUID)) == UUID
        assert store_key(SeedId("type-1")) is None
        assert store_key(InvalidId("abc")) is None

    def test_is_persisted_id(self):
        assert is_persisted_id(UUID) is True
        assert is_persisted_id("type-2") is False
        assert is_persisted_id(None) is False
