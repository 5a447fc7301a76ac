"""
Domain events related to clients.
"""

from typing import Any, Dict, Optional

from .base import DomainEvent


class ClientCreated(DomainEvent):
    """Event fired when a new client is added."""

    def __init__(self,
                 client_id: str,
                 client_name: str,
                 company_id: Optional[str] = None,
                 **kwargs):
        super().__init__(**kwargs)
        self.client_id = client_id
        self.client_name = client_name
        self.company_id = company_id

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "client_id": self.client_id,
            "client_name": self.client_name,
            "company_id": self.company_id
        }
