"""
Event handlers and event system setup.
"""

from .event_setup import setup_event_handlers, initialize_event_system, get_notification_handler
from .notification_handlers import ActivityLogHandler, NotificationLogHandler, ProjectActivityHandler

__all__ = [
    "setup_event_handlers",
    "initialize_event_system",
    "get_notification_handler",
    "ActivityLogHandler",
    "NotificationLogHandler",
    "ProjectActivityHandler",
]
