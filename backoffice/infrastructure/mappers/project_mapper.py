"""
Project mapper for converting between Project aggregates and ``projects`` rows.
"""

from typing import List, Optional

from backoffice.domain.models.project import (
    Project, ProjectDraft, Credential, Hosting, OtherAccess, Payment
)
from backoffice.domain.models.status import normalize_status, resolve_original_status
from backoffice.domain.repositories.store import Row
from .dates import to_calendar_date, parse_calendar_date


UNKNOWN_CLIENT = "Unknown Client"


class ProjectMapper:
    """Maps between the Project aggregate and the projects table."""

    def to_insert_row(
        self,
        draft: ProjectDraft,
        project_type_id: Optional[str],
        project_category_id: Optional[str]
    ) -> Row:
        """
        Row for a new project.
        Type and category ids must already be reduced to persisted keys.
        A missing start date is written as an empty string.
        """
        return {
            "name": draft.name,
            "client_id": draft.client_id,
            "description": draft.description or "",
            "url": draft.url or "",
            "start_date": to_calendar_date(draft.start_date) or "",
            "deadline_date": to_calendar_date(draft.end_date),
            "budget": draft.price or 0,
            "status": normalize_status(draft.status).value,
            "original_status": resolve_original_status(draft.original_status, draft.status),
            "project_type_id": project_type_id,
            "project_category_id": project_category_id,
        }

    def to_update_row(
        self,
        draft: ProjectDraft,
        project_type_id: Optional[str],
        project_category_id: Optional[str]
    ) -> Row:
        """Only the fields present in the draft."""
        values: Row = {}
        if draft.name is not None:
            values["name"] = draft.name
        if draft.client_id is not None:
            values["client_id"] = draft.client_id
        if draft.description is not None:
            values["description"] = draft.description
        if draft.url is not None:
            values["url"] = draft.url
        if draft.start_date is not None:
            values["start_date"] = to_calendar_date(draft.start_date) or ""
        if draft.end_date is not None or draft.clear_end_date:
            values["deadline_date"] = to_calendar_date(draft.end_date)
        if draft.price is not None:
            values["budget"] = draft.price
        if draft.project_type_id is not None:
            values["project_type_id"] = project_type_id
        if draft.project_category_id is not None:
            values["project_category_id"] = project_category_id

        if draft.status is not None:
            values["status"] = normalize_status(draft.status).value
        if draft.status is not None or draft.original_status is not None:
            values["original_status"] = resolve_original_status(draft.original_status, draft.status)
        return values

    def to_domain(
        self,
        row: Row,
        client_name: Optional[str] = None,
        credentials: Optional[Credential] = None,
        hosting: Optional[Hosting] = None,
        other_access: Optional[List[OtherAccess]] = None,
        payments: Optional[List[Payment]] = None,
        project_type: str = "",
        project_category: str = ""
    ) -> Project:
        """Build the aggregate from a project row and its resolved parts."""
        status = normalize_status(row.get("status"))
        return Project(
            id=row.get("id"),
            name=row.get("name") or "",
            client_id=row.get("client_id"),
            client_name=client_name or UNKNOWN_CLIENT,
            description=row.get("description") or "",
            url=row.get("url") if isinstance(row.get("url"), str) else "",
            start_date=parse_calendar_date(row.get("start_date")),
            end_date=parse_calendar_date(row.get("deadline_date")),
            price=float(row.get("budget") or 0),
            status=status,
            original_status=row.get("original_status") or status.value,
            project_type_id=row.get("project_type_id"),
            project_category_id=row.get("project_category_id"),
            project_type=project_type or "",
            project_category=project_category or "",
            credentials=credentials or Credential(),
            hosting=hosting or Hosting(),
            other_access=list(other_access or []),
            payments=list(payments or []),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at")
        )
