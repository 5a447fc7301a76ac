"""
Project status normalization.
The store keeps a small closed set of statuses while the UI works with richer
labels (planning, in-progress, review). Those labels collapse to ``active`` for
storage and survive separately as ``original_status`` for display.
"""

import logging
from enum import Enum
from typing import Optional, Union


logger = logging.getLogger(__name__)


class ProjectStatus(str, Enum):
    """Project status."""
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"
    CANCELLED = "cancelled"
    UNDER_REVISION = "under-revision"


VALID_STATUSES = frozenset(status.value for status in ProjectStatus)


def normalize_status(value: Union[str, ProjectStatus, None]) -> ProjectStatus:
    """
    Map any incoming status to the closed set.
    Unknown values (including None) become ACTIVE.
    """
    if isinstance(value, ProjectStatus):
        return value
    if value and value in VALID_STATUSES:
        return ProjectStatus(value)
    if value:
        logger.debug(f"Status '{value}' is not a stored status, using 'active'")
    return ProjectStatus.ACTIVE


def resolve_original_status(
    original_status: Optional[str],
    status: Union[str, ProjectStatus, None]
) -> str:
    """Label kept for display: original_status, then status, then 'active'."""
    if original_status:
        return original_status
    if isinstance(status, ProjectStatus):
        return status.value
    if status:
        return status
    return ProjectStatus.ACTIVE.value


def display_status(
    status: Union[str, ProjectStatus],
    original_status: Optional[str] = None
) -> str:
    """Human label for a status."""
    value = status.value if isinstance(status, ProjectStatus) else status
    if value == ProjectStatus.ACTIVE.value and original_status == "in-progress":
        return "In Progress"
    if not value:
        return ""
    return value[0].upper() + value[1:].replace("-", " ")
