"""
Client and company DTOs for the application layer.
"""

from typing import Optional

from pydantic import EmailStr, Field

from backoffice.domain.models.client import Client, Company
from .base_dto import RequestDTO, ResponseDTO


class CreateClientRequestDTO(RequestDTO):
    """DTO for adding a client."""

    name: str = Field(min_length=1, max_length=255, description="Client name")
    email: Optional[EmailStr] = Field(default=None, description="Billing email")
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100, description="State/Province")
    zip_code: Optional[str] = Field(default=None, max_length=20)
    country: Optional[str] = Field(default=None, max_length=100)
    company_id: Optional[str] = Field(default=None, description="Company the client belongs to")

    def to_domain(self) -> Client:
        return Client(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            country=self.country,
            company_id=self.company_id
        )


class ClientResponseDTO(ResponseDTO):
    """DTO for client responses."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    company_id: Optional[str] = None

    @classmethod
    def from_domain(cls, client: Client) -> "ClientResponseDTO":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            city=client.city,
            state=client.state,
            zip_code=client.zip_code,
            country=client.country,
            company_id=client.company_id,
            created_at=client.created_at,
            updated_at=client.updated_at
        )


class CompanyRequestDTO(RequestDTO):
    name: str = Field(min_length=1, max_length=255)


class CompanyResponseDTO(ResponseDTO):
    name: str

    @classmethod
    def from_domain(cls, company: Company) -> "CompanyResponseDTO":
        return cls(
            id=company.id,
            name=company.name,
            created_at=company.created_at,
            updated_at=company.updated_at
        )
