"""
Client mapper for converting between ``clients`` / ``companies`` rows and
domain entities.
"""

from backoffice.domain.models.client import Client, Company
from backoffice.domain.repositories.store import Row


CLIENT_FIELDS = ("name", "email", "phone", "address", "city", "state", "zip_code", "country", "company_id")


class ClientMapper:
    """Maps between Client / Company entities and store rows."""

    def row_to_domain(self, row: Row) -> Client:
        """Convert a ``clients`` row to a Client."""
        return Client(
            id=row.get("id"),
            name=row.get("name") or "",
            email=row.get("email"),
            phone=row.get("phone"),
            address=row.get("address"),
            city=row.get("city"),
            state=row.get("state"),
            zip_code=row.get("zip_code"),
            country=row.get("country"),
            company_id=row.get("company_id"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at")
        )

    def to_insert_row(self, client: Client) -> Row:
        """Row for a new client; blank optional fields are stored as NULL."""
        row: Row = {}
        for name in CLIENT_FIELDS:
            value = getattr(client, name)
            if isinstance(value, str):
                value = value.strip() or None
            row[name] = value
        return row

    def company_row_to_domain(self, row: Row) -> Company:
        return Company(
            id=row.get("id"),
            name=row.get("name") or "",
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at")
        )
