"""
Event handlers for user-facing notifications and activity logging.
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from backoffice.domain.events.base import EventHandler, DomainEvent
from backoffice.domain.events.project_events import NotificationRaised, ProjectCreated, ProjectUpdated
from backoffice.domain.events.invoice_events import InvoiceSent, InvoiceGenerated
from backoffice.domain.events.client_events import ClientCreated


logger = logging.getLogger(__name__)


class ActivityLogHandler(EventHandler):
    """Logs every event for debugging."""

    def can_handle(self, event: DomainEvent) -> bool:
        return True

    async def handle(self, event: DomainEvent) -> None:
        logger.debug(f"Event received: {event.event_type} (ID: {event.event_id})")


class NotificationLogHandler(EventHandler):
    """
    Collects user-facing notifications.
    Keeps the most recent ones so clients can poll them.
    """

    def __init__(self, max_notifications: int = 100):
        self._notifications: Deque[Dict[str, Any]] = deque(maxlen=max_notifications)

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, NotificationRaised)

    async def handle(self, event: DomainEvent) -> None:
        if event.variant == "destructive":
            logger.warning(f"Notification: {event.title} - {event.description}")
        else:
            logger.info(f"Notification: {event.title} - {event.description}")
        self._notifications.append(event.to_dict())

    def recent(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Newest notifications first."""
        items = list(reversed(self._notifications))
        return items[:limit] if limit else items

    def clear(self) -> None:
        self._notifications.clear()


class ProjectActivityHandler(EventHandler):
    """Records project, client and invoice activity in the log."""

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, (ProjectCreated, ProjectUpdated, InvoiceSent, InvoiceGenerated, ClientCreated))

    async def handle(self, event: DomainEvent) -> None:
        if isinstance(event, ProjectCreated):
            logger.info(f"Project created: {event.project_name} ({event.project_id}) for client {event.client_id}")
        elif isinstance(event, ProjectUpdated):
            changes = []
            if event.payments_replaced:
                changes.append("payments")
            if event.other_access_replaced:
                changes.append("other access")
            suffix = f", replaced {' and '.join(changes)}" if changes else ""
            logger.info(f"Project updated: {event.project_name} ({event.project_id}){suffix}")
        elif isinstance(event, InvoiceSent):
            logger.info(f"Invoice {event.invoice_number} sent to {event.client_email}")
        elif isinstance(event, InvoiceGenerated):
            logger.info(f"Invoice {event.invoice_number} generated for project {event.project_id}: {event.amount}")
        elif isinstance(event, ClientCreated):
            logger.info(f"Client created: {event.client_name} ({event.client_id})")
