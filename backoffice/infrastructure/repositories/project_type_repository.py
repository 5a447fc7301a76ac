"""
Project type repository implementation on a BackingStore.
Seed types and categories (``type-*`` / ``cat-*``) are served from the static
catalogue and are read-only; persisted ones live in the store.
"""

import logging
from typing import List, Optional

from backoffice.domain.models.base import ValidationError, EntityNotFoundError
from backoffice.domain.models.identifiers import IdKind, PersistedId, SeedId, classify_id
from backoffice.domain.models.project_type import (
    ProjectType, ProjectCategory, SEED_PROJECT_TYPES, SEED_PROJECT_CATEGORIES,
    find_seed_type, find_seed_category
)
from backoffice.domain.repositories.project_type_repository import ProjectTypeRepository
from backoffice.domain.repositories.store import BackingStore, Row, eq


logger = logging.getLogger(__name__)


def _type_from_row(row: Row) -> ProjectType:
    return ProjectType(
        id=row["id"],
        name=row.get("name") or "",
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at")
    )


def _category_from_row(row: Row) -> ProjectCategory:
    return ProjectCategory(
        id=row["id"],
        name=row.get("name") or "",
        project_type_id=row.get("project_type_id"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at")
    )


class StoreProjectTypeRepository(ProjectTypeRepository):
    """Project types and categories, falling back to the seed catalogue."""

    def __init__(self, store: BackingStore):
        self.store = store

    async def get_project_types(self) -> List[ProjectType]:
        rows = await self.store.select("project_types", order_by="name")
        if not rows:
            return sorted(SEED_PROJECT_TYPES, key=lambda t: t.name)
        return [_type_from_row(row) for row in rows]

    async def get_project_categories(self) -> List[ProjectCategory]:
        rows = await self.store.select("project_categories", order_by="name")
        if not rows:
            return sorted(SEED_PROJECT_CATEGORIES, key=lambda c: c.name)
        return [_category_from_row(row) for row in rows]

    async def get_categories_by_type(self, project_type_id: str) -> List[ProjectCategory]:
        classified = classify_id(project_type_id, IdKind.PROJECT_TYPE)
        if isinstance(classified, SeedId):
            return sorted(
                (c for c in SEED_PROJECT_CATEGORIES if c.project_type_id == project_type_id),
                key=lambda c: c.name
            )
        if not isinstance(classified, PersistedId):
            logger.warning(f"Invalid project type id '{project_type_id}'")
            return []

        rows = await self.store.select(
            "project_categories", [eq("project_type_id", project_type_id)], order_by="name"
        )
        return [_category_from_row(row) for row in rows]

    async def get_project_type_by_id(self, type_id: str) -> Optional[ProjectType]:
        classified = classify_id(type_id, IdKind.PROJECT_TYPE)
        if isinstance(classified, SeedId):
            return find_seed_type(type_id)
        if not isinstance(classified, PersistedId):
            return None
        row = await self.store.maybe_single("project_types", [eq("id", type_id)])
        return _type_from_row(row) if row else None

    async def get_project_category_by_id(self, category_id: str) -> Optional[ProjectCategory]:
        classified = classify_id(category_id, IdKind.PROJECT_CATEGORY)
        if isinstance(classified, SeedId):
            return find_seed_category(category_id)
        if not isinstance(classified, PersistedId):
            return None
        row = await self.store.maybe_single("project_categories", [eq("id", category_id)])
        return _category_from_row(row) if row else None

    async def add_project_type(self, name: str) -> ProjectType:
        if not name or not name.strip():
            raise ValidationError("Project type name is required", "name")
        rows = await self.store.insert("project_types", {"name": name.strip()})
        logger.info(f"Added project type {rows[0]['id']} ({name})")
        return _type_from_row(rows[0])

    async def update_project_type(self, type_id: str, name: str) -> ProjectType:
        self._require_persisted(type_id, IdKind.PROJECT_TYPE, "project type")
        if not name or not name.strip():
            raise ValidationError("Project type name is required", "name")
        rows = await self.store.update("project_types", {"name": name.strip()}, [eq("id", type_id)])
        if not rows:
            raise EntityNotFoundError("ProjectType", type_id)
        return _type_from_row(rows[0])

    async def delete_project_type(self, type_id: str) -> bool:
        self._require_persisted(type_id, IdKind.PROJECT_TYPE, "project type")
        async with self.store.transaction():
            await self.store.delete("project_categories", [eq("project_type_id", type_id)])
            deleted = await self.store.delete("project_types", [eq("id", type_id)])
        return deleted > 0

    async def add_project_category(self, name: str, project_type_id: str) -> ProjectCategory:
        if not name or not name.strip():
            raise ValidationError("Category name is required", "name")
        self._require_persisted(project_type_id, IdKind.PROJECT_TYPE, "project type")
        rows = await self.store.insert(
            "project_categories", {"name": name.strip(), "project_type_id": project_type_id}
        )
        return _category_from_row(rows[0])

    async def update_project_category(
        self,
        category_id: str,
        name: str,
        project_type_id: str
    ) -> ProjectCategory:
        self._require_persisted(category_id, IdKind.PROJECT_CATEGORY, "category")
        self._require_persisted(project_type_id, IdKind.PROJECT_TYPE, "project type")
        if not name or not name.strip():
            raise ValidationError("Category name is required", "name")
        rows = await self.store.update(
            "project_categories",
            {"name": name.strip(), "project_type_id": project_type_id},
            [eq("id", category_id)]
        )
        if not rows:
            raise EntityNotFoundError("ProjectCategory", category_id)
        return _category_from_row(rows[0])

    async def delete_project_category(self, category_id: str) -> bool:
        self._require_persisted(category_id, IdKind.PROJECT_CATEGORY, "category")
        return await self.store.delete("project_categories", [eq("id", category_id)]) > 0

    def _require_persisted(self, value: str, kind: IdKind, label: str) -> None:
        classified = classify_id(value, kind)
        if isinstance(classified, SeedId):
            raise ValidationError(f"Sample {label} '{value}' cannot be changed", "id")
        if not isinstance(classified, PersistedId):
            raise ValidationError(f"Invalid {label} id '{value}'", "id")
