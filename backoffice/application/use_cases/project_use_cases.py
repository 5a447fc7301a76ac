"""
Project use cases for the application layer.
Reads never raise: failures are logged, reported as a notification and turned
into an empty result. Creating a project reports and re-raises; updating
reports and returns None.
"""

import logging
from typing import List, Optional

from backoffice.domain.events.base import publish_event
from backoffice.domain.events.project_events import ProjectCreated, ProjectUpdated
from backoffice.domain.models.project import Project, ProjectDraft
from backoffice.domain.models.project_type import ProjectType, ProjectCategory
from backoffice.domain.repositories.project_repository import ProjectRepository
from backoffice.domain.repositories.project_type_repository import ProjectTypeRepository
from .base_use_case import notify_failure, failure_description


logger = logging.getLogger(__name__)


class ListProjectsUseCase:
    """List every project aggregate."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def execute(self) -> List[Project]:
        try:
            return await self.project_repository.list_projects()
        except Exception as e:
            logger.error(f"Error fetching projects: {str(e)}")
            await notify_failure("Error", "Failed to fetch projects. Please try again.")
            return []


class GetProjectUseCase:
    """Fetch a single project aggregate."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> Optional[Project]:
        try:
            return await self.project_repository.get_project_by_id(project_id)
        except Exception as e:
            logger.error(f"Error fetching project {project_id}: {str(e)}")
            await notify_failure("Error", "Failed to fetch project details. Please try again.")
            return None


class CreateProjectUseCase:
    """Create a project with its credentials and payments."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def execute(self, draft: ProjectDraft) -> Project:
        try:
            project = await self.project_repository.add_project(draft)
        except Exception as e:
            logger.error(f"Error adding project: {str(e)}")
            await notify_failure(
                "Error", failure_description(e, "Failed to create project. Please try again.")
            )
            raise

        await publish_event(ProjectCreated(
            project_id=project.id,
            client_id=project.client_id,
            project_name=project.name,
            status=project.status.value,
            budget=project.price
        ))
        return project


class UpdateProjectUseCase:
    """Update a project; returns None when the update failed."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def execute(self, project_id: str, draft: ProjectDraft) -> Optional[Project]:
        try:
            project = await self.project_repository.update_project(project_id, draft)
        except Exception as e:
            logger.error(f"Error updating project {project_id}: {str(e)}")
            await notify_failure(
                "Error", failure_description(e, "Failed to update project. Please try again.")
            )
            return None

        await publish_event(ProjectUpdated(
            project_id=project.id,
            project_name=project.name,
            payments_replaced=draft.payments is not None,
            other_access_replaced=draft.other_access is not None
        ))
        return project


class ListProjectTypesUseCase:
    """List project types; failures degrade to an empty list."""

    def __init__(self, project_type_repository: ProjectTypeRepository):
        self.project_type_repository = project_type_repository

    async def execute(self) -> List[ProjectType]:
        try:
            return await self.project_type_repository.get_project_types()
        except Exception as e:
            logger.error(f"Error fetching project types: {str(e)}")
            await notify_failure("Error", "Failed to fetch project types")
            return []


class ListProjectCategoriesUseCase:
    """List categories, optionally of one project type."""

    def __init__(self, project_type_repository: ProjectTypeRepository):
        self.project_type_repository = project_type_repository

    async def execute(self, project_type_id: Optional[str] = None) -> List[ProjectCategory]:
        try:
            if project_type_id:
                return await self.project_type_repository.get_categories_by_type(project_type_id)
            return await self.project_type_repository.get_project_categories()
        except Exception as e:
            logger.error(f"Error fetching project categories: {str(e)}")
            await notify_failure("Error", "Failed to fetch project categories")
            return []
