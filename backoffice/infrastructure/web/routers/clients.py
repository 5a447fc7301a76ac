"""
Client router.
Lists, reads and adds clients.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.application.dto.client_dto import CreateClientRequestDTO, ClientResponseDTO
from backoffice.application.use_cases.client_use_cases import (
    ListClientsUseCase, GetClientUseCase, CreateClientUseCase
)
from backoffice.infrastructure.repositories import StoreClientRepository
from backoffice.infrastructure.web.dependencies import get_client_repository


router = APIRouter()

Repository = Annotated[StoreClientRepository, Depends(get_client_repository)]


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(
    repository: Repository,
    company_id: Optional[str] = Query(None, description="Only clients of this company")
):
    """
    List clients ordered by name.
    A store failure yields an empty list and a notification.
    """
    clients = await ListClientsUseCase(repository).execute(company_id)
    return [ClientResponseDTO.from_domain(client) for client in clients]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponseDTO)
async def create_client(request: CreateClientRequestDTO, repository: Repository):
    """
    Add a client.

    - **name**: Client name (required)
    - **email**, **phone**, **address**, **city**, **state**, **zip_code**, **country**: Optional contact details
    - **company_id**: Existing company, if any
    """
    client = await CreateClientUseCase(repository).execute(request.to_domain())
    return ClientResponseDTO.from_domain(client)


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(client_id: str, repository: Repository):
    client = await GetClientUseCase(repository).execute(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Client {client_id} not found"
        )
    return ClientResponseDTO.from_domain(client)
