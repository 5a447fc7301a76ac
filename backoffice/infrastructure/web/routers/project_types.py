"""
Project type and category router.
Sample types and categories are listed alongside stored ones but cannot be
changed.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.application.dto.base_dto import MessageResponseDTO
from backoffice.application.dto.project_dto import (
    ProjectTypeRequestDTO, ProjectCategoryRequestDTO,
    ProjectTypeResponseDTO, ProjectCategoryResponseDTO
)
from backoffice.application.use_cases.project_use_cases import (
    ListProjectTypesUseCase, ListProjectCategoriesUseCase
)
from backoffice.infrastructure.repositories import StoreProjectTypeRepository
from backoffice.infrastructure.web.dependencies import get_project_type_repository


router = APIRouter()

Repository = Annotated[StoreProjectTypeRepository, Depends(get_project_type_repository)]


@router.get("", response_model=List[ProjectTypeResponseDTO])
async def list_project_types(repository: Repository):
    types = await ListProjectTypesUseCase(repository).execute()
    return [ProjectTypeResponseDTO.from_domain(t) for t in types]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectTypeResponseDTO)
async def create_project_type(request: ProjectTypeRequestDTO, repository: Repository):
    project_type = await repository.add_project_type(request.name)
    return ProjectTypeResponseDTO.from_domain(project_type)


@router.get("/categories", response_model=List[ProjectCategoryResponseDTO])
async def list_project_categories(
    repository: Repository,
    project_type_id: Optional[str] = Query(None, description="Only categories of this type")
):
    categories = await ListProjectCategoriesUseCase(repository).execute(project_type_id)
    return [ProjectCategoryResponseDTO.from_domain(c) for c in categories]


@router.post("/categories", status_code=status.HTTP_201_CREATED, response_model=ProjectCategoryResponseDTO)
async def create_project_category(request: ProjectCategoryRequestDTO, repository: Repository):
    category = await repository.add_project_category(request.name, request.project_type_id)
    return ProjectCategoryResponseDTO.from_domain(category)


@router.put("/categories/{category_id}", response_model=ProjectCategoryResponseDTO)
async def update_project_category(
    category_id: str,
    request: ProjectCategoryRequestDTO,
    repository: Repository
):
    category = await repository.update_project_category(category_id, request.name, request.project_type_id)
    return ProjectCategoryResponseDTO.from_domain(category)


@router.delete("/categories/{category_id}", response_model=MessageResponseDTO)
async def delete_project_category(category_id: str, repository: Repository):
    if not await repository.delete_project_category(category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found"
        )
    return MessageResponseDTO(message="Category deleted")


@router.get("/{type_id}", response_model=ProjectTypeResponseDTO)
async def get_project_type(type_id: str, repository: Repository):
    project_type = await repository.get_project_type_by_id(type_id)
    if not project_type:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project type {type_id} not found"
        )
    return ProjectTypeResponseDTO.from_domain(project_type)


@router.put("/{type_id}", response_model=ProjectTypeResponseDTO)
async def update_project_type(type_id: str, request: ProjectTypeRequestDTO, repository: Repository):
    project_type = await repository.update_project_type(type_id, request.name)
    return ProjectTypeResponseDTO.from_domain(project_type)


@router.delete("/{type_id}", response_model=MessageResponseDTO)
async def delete_project_type(type_id: str, repository: Repository):
    """Delete a project type together with its categories."""
    if not await repository.delete_project_type(type_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project type {type_id} not found"
        )
    return MessageResponseDTO(message="Project type deleted")
