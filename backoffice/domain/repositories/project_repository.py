"""
Project repository interface.
Defines the contract for reading and writing Project aggregates.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from backoffice.domain.models.project import Project, ProjectDraft


class ProjectRepository(ABC):
    """
    Repository interface for the Project aggregate.
    Implementations raise domain exceptions; absorbing failures is left to
    the application layer.
    """

    @abstractmethod
    async def list_projects(self) -> List[Project]:
        """
        Fetch every project, newest first, with client name, credentials,
        hosting, other access and payments filled in.
        """
        pass

    @abstractmethod
    async def get_project_by_id(self, project_id: str) -> Optional[Project]:
        """
        Fetch a single project aggregate.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def add_project(self, draft: ProjectDraft) -> Project:
        """
        Create a project and its dependent rows.
        Raises ValidationError before touching the store when name or
        client is missing.
        """
        pass

    @abstractmethod
    async def update_project(self, project_id: str, draft: ProjectDraft) -> Project:
        """
        Update a project in place. Payments and other access are replaced
        wholesale when provided and left untouched when None.
        """
        pass
