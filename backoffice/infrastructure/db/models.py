"""
SQLAlchemy table definitions.
One MetaData describes the relational schema for both store implementations;
the in-memory store derives its column sets from it.
"""

from typing import Dict, FrozenSet

from sqlalchemy import (
    Column, String, DateTime, Text, Numeric, ForeignKey,
    Table, MetaData, CheckConstraint, Index
)


metadata = MetaData()

# Calendar dates are kept as ISO "yyyy-MM-dd" strings
CalendarDate = String(10)
Amount = Numeric(12, 2, asdecimal=False)

PROJECT_STATUS_CHECK = "status IN ('active', 'completed', 'on-hold', 'cancelled', 'under-revision')"


def _timestamps():
    return [
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    ]


companies = Table(
    "companies",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    *_timestamps(),
)

clients = Table(
    "clients",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone", String(50)),
    Column("address", Text),
    Column("city", String(100)),
    Column("state", String(100)),
    Column("zip_code", String(20)),
    Column("country", String(100)),
    Column("company_id", String(36), ForeignKey("companies.id")),
    *_timestamps(),
    Index("idx_clients_company_id", "company_id"),
)

project_types = Table(
    "project_types",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    *_timestamps(),
)

project_categories = Table(
    "project_categories",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("project_type_id", String(36), ForeignKey("project_types.id", ondelete="CASCADE")),
    *_timestamps(),
)

projects = Table(
    "projects",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("client_id", String(36), ForeignKey("clients.id")),
    Column("description", Text),
    Column("url", Text, server_default=""),
    Column("start_date", CalendarDate),
    Column("deadline_date", CalendarDate),
    Column("budget", Amount),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("original_status", String(50)),
    Column("project_type_id", String(36), ForeignKey("project_types.id")),
    Column("project_category_id", String(36), ForeignKey("project_categories.id")),
    *_timestamps(),
    CheckConstraint(PROJECT_STATUS_CHECK, name="projects_status_check"),
    Index("idx_projects_client_id", "client_id"),
)

project_credentials = Table(
    "project_credentials",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("project_id", String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("platform", String(255), nullable=False),
    Column("username", Text),
    Column("password", Text),
    Column("notes", Text),
    *_timestamps(),
    Index("idx_project_credentials_project_platform", "project_id", "platform"),
)

payments = Table(
    "payments",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("project_id", String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("amount", Amount, nullable=False),
    Column("payment_date", CalendarDate, nullable=False),
    Column("payment_method", String(20)),
    Column("description", Text),
    Column("currency", String(3), server_default="USD"),
    *_timestamps(),
    Index("idx_payments_project_id", "project_id"),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("project_id", String(36), ForeignKey("projects.id", ondelete="CASCADE")),
    Column("invoice_number", String(50), nullable=False),
    Column("amount", Amount, nullable=False),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("issue_date", CalendarDate),
    Column("due_date", CalendarDate),
    Column("sent_date", DateTime(timezone=True)),
    Column("paid_date", DateTime(timezone=True)),
    Column("notes", Text),
    *_timestamps(),
)

invoice_items = Table(
    "invoice_items",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("invoice_id", String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
    Column("description", Text, nullable=False),
    Column("quantity", Numeric(10, 2, asdecimal=False), nullable=False),
    Column("unit_price", Amount, nullable=False),
    Column("amount", Amount, nullable=False),
    *_timestamps(),
)


def table_columns() -> Dict[str, FrozenSet[str]]:
    """Column names per table."""
    return {
        name: frozenset(column.name for column in table.columns)
        for name, table in metadata.tables.items()
    }
