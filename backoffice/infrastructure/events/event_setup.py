"""
Event system setup and configuration.
Registers all event handlers with the event dispatcher.
"""

import logging
from typing import Optional

from backoffice.domain.events.base import EventDispatcher, get_event_dispatcher
from .notification_handlers import ActivityLogHandler, NotificationLogHandler, ProjectActivityHandler


logger = logging.getLogger(__name__)

_notification_handler: Optional[NotificationLogHandler] = None


def get_notification_handler() -> NotificationLogHandler:
    """Shared handler holding recent notifications."""
    global _notification_handler
    if _notification_handler is None:
        _notification_handler = NotificationLogHandler()
    return _notification_handler


def setup_event_handlers(dispatcher: Optional[EventDispatcher] = None) -> EventDispatcher:
    """Set up and register all event handlers."""
    dispatcher = dispatcher or get_event_dispatcher()
    dispatcher.clear_handlers()

    project_handler = ProjectActivityHandler()

    dispatcher.register_global_handler(ActivityLogHandler())
    dispatcher.register_handler("NotificationRaised", get_notification_handler())
    dispatcher.register_handler("ProjectCreated", project_handler)
    dispatcher.register_handler("ProjectUpdated", project_handler)
    dispatcher.register_handler("InvoiceSent", project_handler)
    dispatcher.register_handler("InvoiceGenerated", project_handler)
    dispatcher.register_handler("ClientCreated", project_handler)

    registered = dispatcher.get_registered_handlers()
    for event_type, handlers in registered.items():
        logger.info(f"Event {event_type}: {', '.join(handlers)} handlers")
    return dispatcher


def initialize_event_system() -> None:
    """Initialize the complete event system."""
    try:
        setup_event_handlers()
        logger.info("Event system initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize event system: {str(e)}")
        raise
