"""
Client and company domain models.
Clients own projects; a client may belong to a company.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.domain.models.base import BaseEntity, ValidationError


@dataclass
class Company(BaseEntity):
    """Company that groups clients."""

    name: str = ""

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Company name is required", "name")
        if len(self.name) > 255:
            raise ValidationError("Company name too long (max 255 characters)", "name")


@dataclass
class Client(BaseEntity):
    """
    Client the agency builds projects for.
    Address fields are free text; none of them is required.
    """

    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    company_id: Optional[str] = None

    def validate(self) -> None:
        """Validate client state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Client name is required", "name")
        if len(self.name) > 255:
            raise ValidationError("Client name too long (max 255 characters)", "name")
        if self.email and "@" not in self.email:
            raise ValidationError("Invalid email format", "email")
