"""
Domain events related to projects and user-facing notifications.
"""

from typing import Dict, Any, Optional

from .base import DomainEvent


class ProjectCreated(DomainEvent):
    """Event fired when a new project is created."""

    def __init__(self,
                 project_id: str,
                 client_id: str,
                 project_name: str,
                 status: str,
                 budget: Optional[float] = None,
                 **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.client_id = client_id
        self.project_name = project_name
        self.status = status
        self.budget = budget

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "client_id": self.client_id,
            "project_name": self.project_name,
            "status": self.status,
            "budget": self.budget
        }


class ProjectUpdated(DomainEvent):
    """Event fired when a project was updated."""

    def __init__(self,
                 project_id: str,
                 project_name: str,
                 payments_replaced: bool = False,
                 other_access_replaced: bool = False,
                 **kwargs):
        super().__init__(**kwargs)
        self.project_id = project_id
        self.project_name = project_name
        self.payments_replaced = payments_replaced
        self.other_access_replaced = other_access_replaced

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "project_name": self.project_name,
            "payments_replaced": self.payments_replaced,
            "other_access_replaced": self.other_access_replaced
        }


class NotificationRaised(DomainEvent):
    """
    A non-blocking message meant for the user, e.g. a failed fetch.
    variant is "default" or "destructive".
    """

    def __init__(self,
                 title: str,
                 description: str,
                 variant: str = "default",
                 **kwargs):
        super().__init__(**kwargs)
        self.title = title
        self.description = description
        self.variant = variant

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "variant": self.variant
        }
