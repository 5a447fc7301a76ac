"""
Project type and category repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from backoffice.domain.models.project_type import ProjectType, ProjectCategory


class ProjectTypeRepository(ABC):
    """Repository interface for project types and their categories."""

    @abstractmethod
    async def get_project_types(self) -> List[ProjectType]:
        """All project types ordered by name."""
        pass

    @abstractmethod
    async def get_project_categories(self) -> List[ProjectCategory]:
        """All project categories ordered by name."""
        pass

    @abstractmethod
    async def get_categories_by_type(self, project_type_id: str) -> List[ProjectCategory]:
        """Categories belonging to one project type."""
        pass

    @abstractmethod
    async def get_project_type_by_id(self, type_id: str) -> Optional[ProjectType]:
        pass

    @abstractmethod
    async def get_project_category_by_id(self, category_id: str) -> Optional[ProjectCategory]:
        pass

    @abstractmethod
    async def add_project_type(self, name: str) -> ProjectType:
        pass

    @abstractmethod
    async def update_project_type(self, type_id: str, name: str) -> ProjectType:
        pass

    @abstractmethod
    async def delete_project_type(self, type_id: str) -> bool:
        """Delete a type together with its categories."""
        pass

    @abstractmethod
    async def add_project_category(self, name: str, project_type_id: str) -> ProjectCategory:
        pass

    @abstractmethod
    async def update_project_category(
        self,
        category_id: str,
        name: str,
        project_type_id: str
    ) -> ProjectCategory:
        pass

    @abstractmethod
    async def delete_project_category(self, category_id: str) -> bool:
        pass
