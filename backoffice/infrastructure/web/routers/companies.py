"""
Company router.
A company with clients cannot be deleted.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, status

from backoffice.application.dto.base_dto import MessageResponseDTO
from backoffice.application.dto.client_dto import CompanyRequestDTO, CompanyResponseDTO
from backoffice.application.use_cases.client_use_cases import (
    ListCompaniesUseCase, SaveCompanyUseCase, DeleteCompanyUseCase
)
from backoffice.infrastructure.repositories import StoreCompanyRepository
from backoffice.infrastructure.web.dependencies import get_company_repository


router = APIRouter()

Repository = Annotated[StoreCompanyRepository, Depends(get_company_repository)]


@router.get("", response_model=List[CompanyResponseDTO])
async def list_companies(repository: Repository):
    companies = await ListCompaniesUseCase(repository).execute()
    return [CompanyResponseDTO.from_domain(company) for company in companies]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CompanyResponseDTO)
async def create_company(request: CompanyRequestDTO, repository: Repository):
    company = await SaveCompanyUseCase(repository).execute(request.name)
    return CompanyResponseDTO.from_domain(company)


@router.get("/{company_id}", response_model=CompanyResponseDTO)
async def get_company(company_id: str, repository: Repository):
    company = await repository.get_company_by_id(company_id)
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company {company_id} not found"
        )
    return CompanyResponseDTO.from_domain(company)


@router.put("/{company_id}", response_model=CompanyResponseDTO)
async def update_company(company_id: str, request: CompanyRequestDTO, repository: Repository):
    company = await SaveCompanyUseCase(repository).execute(request.name, company_id)
    return CompanyResponseDTO.from_domain(company)


@router.delete("/{company_id}", response_model=MessageResponseDTO)
async def delete_company(company_id: str, repository: Repository):
    """Delete a company. Refused with 409 while clients still belong to it."""
    if not await DeleteCompanyUseCase(repository).execute(company_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company {company_id} not found"
        )
    return MessageResponseDTO(message="Company deleted")
