"""
Project router.
Reads and writes the full project aggregate: core fields, credentials,
hosting, other access and payments.
"""

from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.application.dto.project_dto import (
    CreateProjectRequestDTO, UpdateProjectRequestDTO, ProjectResponseDTO
)
from backoffice.application.dto.invoice_dto import InvoiceResponseDTO
from backoffice.application.use_cases.project_use_cases import (
    ListProjectsUseCase, GetProjectUseCase, CreateProjectUseCase, UpdateProjectUseCase
)
from backoffice.application.use_cases.invoice_use_cases import GetProjectInvoicesUseCase, GenerateInvoiceUseCase
from backoffice.infrastructure.repositories import StoreProjectRepository, StoreInvoiceRepository
from backoffice.infrastructure.web.dependencies import get_project_repository, get_invoice_repository


router = APIRouter()


@router.get("", response_model=List[ProjectResponseDTO])
async def list_projects(
    repository: Annotated[StoreProjectRepository, Depends(get_project_repository)]
):
    """
    List all projects, newest first.
    A store failure yields an empty list and a notification.
    """
    projects = await ListProjectsUseCase(repository).execute()
    return [ProjectResponseDTO.from_domain(project) for project in projects]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def create_project(
    request: CreateProjectRequestDTO,
    repository: Annotated[StoreProjectRepository, Depends(get_project_repository)]
):
    """
    Create a project.

    - **name**: Project name (required)
    - **client_id**: Client the project belongs to (required)
    - **status**: Any label; unknown ones are stored as active
    - **project_type_id** / **project_category_id**: Stored ids or sample ids
    - **credentials**, **hosting**, **other_access**, **payments**: Owned records
    """
    project = await CreateProjectUseCase(repository).execute(request.to_draft())
    return ProjectResponseDTO.from_domain(project)


@router.get("/{project_id}", response_model=ProjectResponseDTO)
async def get_project(
    project_id: str,
    repository: Annotated[StoreProjectRepository, Depends(get_project_repository)]
):
    project = await GetProjectUseCase(repository).execute(project_id)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {project_id} not found"
        )
    return ProjectResponseDTO.from_domain(project)


@router.put("/{project_id}", response_model=ProjectResponseDTO)
async def update_project(
    project_id: str,
    request: UpdateProjectRequestDTO,
    repository: Annotated[StoreProjectRepository, Depends(get_project_repository)]
):
    """
    Update the fields present in the body.
    Omitting ``payments`` or ``other_access`` keeps them; an empty list clears them.
    """
    project = await UpdateProjectUseCase(repository).execute(project_id, request.to_draft())
    if project is None:
        if await repository.get_project_by_id(project_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Project {project_id} not found"
            )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to update project"
        )
    return ProjectResponseDTO.from_domain(project)


@router.get("/{project_id}/invoices", response_model=List[InvoiceResponseDTO])
async def list_project_invoices(
    project_id: str,
    repository: Annotated[StoreInvoiceRepository, Depends(get_invoice_repository)]
):
    invoices = await GetProjectInvoicesUseCase(repository).execute(project_id)
    return [InvoiceResponseDTO.from_domain(invoice) for invoice in invoices]


@router.post(
    "/{project_id}/invoices",
    status_code=status.HTTP_201_CREATED,
    response_model=InvoiceResponseDTO
)
async def generate_project_invoice(
    project_id: str,
    repository: Annotated[StoreInvoiceRepository, Depends(get_invoice_repository)],
    issue_date: Optional[date] = Query(None, description="Defaults to today")
):
    """
    Create a draft invoice from the project's payments.
    Pending payments become one line each; otherwise the unpaid budget is billed.
    """
    invoice = await GenerateInvoiceUseCase(repository).execute(project_id, issue_date)
    return InvoiceResponseDTO.from_domain(invoice)
