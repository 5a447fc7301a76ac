"""
Notifications router.
Exposes recent user-facing notifications and the domain event log.
"""

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, Query

from backoffice.domain.events.base import get_event_dispatcher
from backoffice.infrastructure.events.notification_handlers import NotificationLogHandler
from backoffice.infrastructure.web.dependencies import get_notifications


router = APIRouter()


@router.get("")
async def list_notifications(
    handler: Annotated[NotificationLogHandler, Depends(get_notifications)],
    limit: int = Query(20, ge=1, le=100)
) -> Dict[str, Any]:
    """Most recent notifications, newest first."""
    notifications = handler.recent(limit)
    return {
        "notifications": notifications,
        "total": len(notifications)
    }


@router.get("/events")
async def list_events(limit: int = Query(50, ge=1, le=500)) -> Dict[str, Any]:
    events = get_event_dispatcher().get_event_log(limit)
    return {
        "events": events,
        "total": len(events)
    }
