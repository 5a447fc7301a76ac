"""
Project type and category models, with the static seed catalogue used in
demo/offline mode. Seed ids carry the ``type-`` / ``cat-`` prefixes.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from backoffice.domain.models.base import BaseEntity


@dataclass
class ProjectType(BaseEntity):
    """A project type, e.g. WordPress or Shopify."""

    name: str = ""


@dataclass
class ProjectCategory(BaseEntity):
    """A category within a project type."""

    name: str = ""
    project_type_id: Optional[str] = None


SEED_PROJECT_TYPES: List[ProjectType] = [
    ProjectType(id="type-1", name="WordPress", created_at=datetime(2023, 1, 1)),
    ProjectType(id="type-2", name="Shopify", created_at=datetime(2023, 1, 2)),
    ProjectType(id="type-3", name="Custom Development", created_at=datetime(2023, 1, 3)),
]

SEED_PROJECT_CATEGORIES: List[ProjectCategory] = [
    ProjectCategory(id="cat-1", name="E-commerce", project_type_id="type-1", created_at=datetime(2023, 1, 5)),
    ProjectCategory(id="cat-2", name="Blog", project_type_id="type-1", created_at=datetime(2023, 1, 6)),
    ProjectCategory(id="cat-3", name="Landing Page", project_type_id="type-1", created_at=datetime(2023, 1, 7)),
    ProjectCategory(id="cat-4", name="E-commerce Store", project_type_id="type-2", created_at=datetime(2023, 1, 8)),
    ProjectCategory(id="cat-5", name="Dropshipping", project_type_id="type-2", created_at=datetime(2023, 1, 9)),
    ProjectCategory(id="cat-6", name="Web Application", project_type_id="type-3", created_at=datetime(2023, 1, 10)),
    ProjectCategory(id="cat-7", name="Mobile App", project_type_id="type-3", created_at=datetime(2023, 1, 11)),
]


def find_seed_type(type_id: Optional[str]) -> Optional[ProjectType]:
    return next((t for t in SEED_PROJECT_TYPES if t.id == type_id), None)


def find_seed_category(category_id: Optional[str]) -> Optional[ProjectCategory]:
    return next((c for c in SEED_PROJECT_CATEGORIES if c.id == category_id), None)
