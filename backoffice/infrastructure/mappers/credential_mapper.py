"""
Credential mapper.
All access details of a project share the ``project_credentials`` table and
are told apart by the ``platform`` column:

    main                -> the project's main login
    hosting-{provider}  -> hosting account
    {type}-{name}       -> any other access

``parse_platform`` and ``format_platform`` are the only places that read or
build platform strings.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from backoffice.domain.models.project import Credential, Hosting, OtherAccess, OtherAccessType
from backoffice.domain.repositories.store import Row


logger = logging.getLogger(__name__)


MAIN_PLATFORM = "main"
HOSTING_PREFIX = "hosting-"
HOSTING_PATTERN = HOSTING_PREFIX + "%"


@dataclass(frozen=True)
class MainKey:
    """Platform key of the main credentials."""


@dataclass(frozen=True)
class HostingKey:
    """Platform key of the hosting account."""
    provider: str


@dataclass(frozen=True)
class OtherKey:
    """Platform key of an additional access entry."""
    type: str
    name: str


PlatformKey = Union[MainKey, HostingKey, OtherKey]


def format_platform(key: PlatformKey) -> str:
    """Build the stored platform string for a key."""
    if isinstance(key, MainKey):
        return MAIN_PLATFORM
    if isinstance(key, HostingKey):
        return f"{HOSTING_PREFIX}{key.provider}"
    return f"{key.type}-{key.name}"


def parse_platform(platform: Optional[str]) -> Optional[PlatformKey]:
    """
    Parse a stored platform string.

    Other access keys are split on hyphens: the type is the first segment and
    the name the second, so names that contain a hyphen come back truncated
    ("email-backup-2" -> name "backup").

    Returns:
        The key, or None when the string has no usable name segment
    """
    if not platform:
        return None
    if platform == MAIN_PLATFORM:
        return MainKey()
    if platform.startswith(HOSTING_PREFIX):
        return HostingKey(platform[len(HOSTING_PREFIX):])

    segments = platform.split("-")
    if len(segments) < 2 or not segments[0] or not segments[1]:
        return None
    return OtherKey(segments[0], segments[1])


def access_type(value: str) -> Union[OtherAccessType, str]:
    """Known access types become the enum; anything else stays a string."""
    try:
        return OtherAccessType(value)
    except ValueError:
        return value


@dataclass
class DecodedCredentials:
    """Credentials of one project as read back from the store."""

    main: Credential = field(default_factory=Credential)
    hosting: Hosting = field(default_factory=Hosting)
    other_access: List[OtherAccess] = field(default_factory=list)


def main_row(project_id: str, credentials: Credential) -> Row:
    return {
        "project_id": project_id,
        "platform": format_platform(MainKey()),
        "username": credentials.username,
        "password": credentials.password,
        "notes": credentials.notes,
    }


def hosting_row(project_id: str, hosting: Hosting) -> Row:
    creds = hosting.credentials or Credential()
    return {
        "project_id": project_id,
        "platform": format_platform(HostingKey(hosting.provider)),
        "username": creds.username or "",
        "password": creds.password or "",
        "notes": hosting.notes,
    }


def other_access_row(project_id: str, access: OtherAccess) -> Row:
    creds = access.credentials or Credential()
    return {
        "project_id": project_id,
        "platform": format_platform(OtherKey(access.type_value, access.name)),
        "username": creds.username,
        "password": creds.password,
        "notes": access.notes,
    }


def encode_credentials(
    project_id: str,
    credentials: Optional[Credential],
    hosting: Optional[Hosting],
    other_access: Optional[List[OtherAccess]]
) -> List[Row]:
    """
    Rows for a project's credentials.
    The main row is written when credentials are given, the hosting row only
    when a provider is set, and one row per other access entry.
    """
    rows = []
    if credentials is not None:
        rows.append(main_row(project_id, credentials))
    if hosting is not None and hosting.provider:
        rows.append(hosting_row(project_id, hosting))
    for access in other_access or []:
        rows.append(other_access_row(project_id, access))
    return rows


def decode_credentials(rows: List[Row]) -> DecodedCredentials:
    """Rebuild main credentials, hosting and other access from stored rows."""
    decoded = DecodedCredentials()
    hosting_seen = False

    for row in rows:
        key = parse_platform(row.get("platform"))
        username = row.get("username") or ""
        password = row.get("password") or ""

        if key is None:
            logger.warning(f"Skipping credential row with unusable platform '{row.get('platform')}'")
            continue

        if isinstance(key, MainKey):
            decoded.main = Credential(
                username=username,
                password=password,
                notes=row.get("notes") or ""
            )
        elif isinstance(key, HostingKey):
            if hosting_seen:
                logger.warning(f"Project {row.get('project_id')} has more than one hosting row")
            hosting_seen = True
            decoded.hosting = Hosting(
                provider=key.provider,
                credentials=Credential(username=username, password=password),
                notes=row.get("notes")
            )
        else:
            decoded.other_access.append(OtherAccess(
                id=row.get("id"),
                type=access_type(key.type),
                name=key.name,
                credentials=Credential(username=username, password=password),
                notes=row.get("notes")
            ))

    return decoded
