"""
Identifier classification.
Project types and categories live in two id spaces: rows persisted in the
relational store (UUIDs) and the static seed catalogue (prefixed ids such as
``type-1`` or ``cat-3``). Ids are classified once, at the boundary, into a
tagged value instead of being re-parsed by prefix throughout the code.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class IdKind(str, Enum):
    """Entity kinds that have a seed id namespace."""
    PROJECT_TYPE = "project_type"
    PROJECT_CATEGORY = "project_category"


SEED_PREFIXES = {
    IdKind.PROJECT_TYPE: "type-",
    IdKind.PROJECT_CATEGORY: "cat-",
}

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE
)


@dataclass(frozen=True)
class PersistedId:
    """A key of a row in the relational store."""
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class SeedId:
    """An id from the in-memory seed catalogue."""
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class InvalidId:
    """Anything else; treated as absent."""
    raw: Optional[str] = None

    def __str__(self) -> str:
        return self.raw or ""


ClassifiedId = Union[PersistedId, SeedId, InvalidId]


def classify_id(value: Optional[str], kind: Optional[IdKind] = None) -> ClassifiedId:
    """
    Classify an identifier.

    Args:
        value: Raw identifier, possibly None
        kind: Entity kind whose seed prefix applies; any seed prefix when None

    Returns:
        SeedId, PersistedId or InvalidId
    """
    if not value:
        return InvalidId(value)

    prefixes = [SEED_PREFIXES[kind]] if kind else list(SEED_PREFIXES.values())
    if any(value.startswith(prefix) for prefix in prefixes):
        return SeedId(value)

    if UUID_PATTERN.match(value):
        return PersistedId(value)

    return InvalidId(value)


def is_persisted_id(value: Optional[str], kind: Optional[IdKind] = None) -> bool:
    """Check whether an identifier refers to a persisted row."""
    return isinstance(classify_id(value, kind), PersistedId)


def store_key(classified: ClassifiedId) -> Optional[str]:
    """Value to write into a foreign-key column: only persisted ids survive."""
    if isinstance(classified, PersistedId):
        return classified.raw
    return None
