"""
Database infrastructure for the agency back-office.
"""

from .database import create_engine, get_engine, create_all_tables, dispose_engine
from .models import metadata, table_columns
from .migrations import check_and_update_projects_schema

__all__ = [
    "create_engine",
    "get_engine",
    "create_all_tables",
    "dispose_engine",
    "metadata",
    "table_columns",
    "check_and_update_projects_schema",
]
