"""
Calendar date conversion between domain values and ``yyyy-MM-dd`` columns.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union


logger = logging.getLogger(__name__)

DateInput = Union[date, datetime, str, None]


def to_calendar_date(value: DateInput) -> Optional[str]:
    """
    Serialize to ``yyyy-MM-dd``.
    Any time of day is dropped. Strings are trusted and cut to the date part.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def parse_calendar_date(value: DateInput) -> Optional[date]:
    """Read a stored calendar date; unparseable values become None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning(f"Ignoring unparseable date '{value}'")
        return None
