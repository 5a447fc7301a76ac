"""
Domain events for the application.
Event-driven notifications for project, client and invoice changes.
"""

from .base import DomainEvent, EventHandler, EventDispatcher, get_event_dispatcher, publish_event
from .project_events import ProjectCreated, ProjectUpdated, NotificationRaised
from .invoice_events import InvoiceSent, InvoiceGenerated
from .client_events import ClientCreated

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "get_event_dispatcher",
    "publish_event",
    "ProjectCreated",
    "ProjectUpdated",
    "NotificationRaised",
    "InvoiceSent",
    "InvoiceGenerated",
    "ClientCreated"
]
