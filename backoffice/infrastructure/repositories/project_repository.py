"""
Project repository implementation on a BackingStore.
Reads and writes the whole Project aggregate: the project row, its
credential rows and its payment rows.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from backoffice.domain.models.base import StoreError, SchemaMismatchError, EntityNotFoundError
from backoffice.domain.models.identifiers import (
    IdKind, ClassifiedId, PersistedId, SeedId, InvalidId, classify_id, store_key
)
from backoffice.domain.models.project import Project, ProjectDraft, Credential, Hosting
from backoffice.domain.models.project_type import find_seed_type, find_seed_category
from backoffice.domain.repositories.project_repository import ProjectRepository
from backoffice.domain.repositories.store import BackingStore, Filter, Row, eq, neq, like, not_like, in_
from backoffice.infrastructure.mappers.project_mapper import ProjectMapper
from backoffice.infrastructure.mappers.credential_mapper import (
    MAIN_PLATFORM, HOSTING_PATTERN,
    encode_credentials, decode_credentials, main_row, hosting_row, other_access_row,
)
from backoffice.infrastructure.mappers.payment_mapper import encode_payments, decode_payments


logger = logging.getLogger(__name__)


class StoreProjectRepository(ProjectRepository):
    """Project aggregate reader and writer over a backing store."""

    def __init__(self, store: BackingStore):
        self.store = store
        self.mapper = ProjectMapper()

    # Reader

    async def list_projects(self) -> List[Project]:
        """All projects, newest first."""
        rows = await self.store.select("projects", order_by="created_at", descending=True)
        if not rows:
            return []

        client_names = await self._names_by_id("clients", (row.get("client_id") for row in rows))
        type_names = await self._names_by_id(
            "project_types", self._persisted(rows, "project_type_id", IdKind.PROJECT_TYPE)
        )
        category_names = await self._names_by_id(
            "project_categories", self._persisted(rows, "project_category_id", IdKind.PROJECT_CATEGORY)
        )

        projects = []
        for row in rows:
            projects.append(await self._assemble(row, client_names, type_names, category_names))
        return projects

    async def get_project_by_id(self, project_id: str) -> Optional[Project]:
        row = await self.store.maybe_single("projects", [eq("id", project_id)])
        if not row:
            return None

        client_names = await self._names_by_id("clients", [row.get("client_id")])
        type_names = await self._names_by_id(
            "project_types", self._persisted([row], "project_type_id", IdKind.PROJECT_TYPE)
        )
        category_names = await self._names_by_id(
            "project_categories", self._persisted([row], "project_category_id", IdKind.PROJECT_CATEGORY)
        )
        return await self._assemble(row, client_names, type_names, category_names)

    async def _assemble(
        self,
        row: Row,
        client_names: Dict[str, str],
        type_names: Dict[str, str],
        category_names: Dict[str, str]
    ) -> Project:
        project_id = row["id"]
        payment_rows = await self.store.select("payments", [eq("project_id", project_id)])
        credential_rows = await self.store.select("project_credentials", [eq("project_id", project_id)])
        decoded = decode_credentials(credential_rows)

        type_id = row.get("project_type_id")
        category_id = row.get("project_category_id")
        return self.mapper.to_domain(
            row,
            client_name=client_names.get(row.get("client_id")),
            credentials=decoded.main,
            hosting=decoded.hosting,
            other_access=decoded.other_access,
            payments=decode_payments(payment_rows),
            project_type=type_names.get(type_id) or self._seed_type_name(type_id),
            project_category=category_names.get(category_id) or self._seed_category_name(category_id)
        )

    def _persisted(self, rows: Iterable[Row], column: str, kind: IdKind) -> List[str]:
        return [
            row[column] for row in rows
            if isinstance(classify_id(row.get(column), kind), PersistedId)
        ]

    async def _names_by_id(self, table: str, ids: Iterable[Optional[str]]) -> Dict[str, str]:
        wanted = sorted({value for value in ids if value})
        if not wanted:
            return {}
        rows = await self.store.select(table, [in_("id", wanted)], columns=["id", "name"])
        return {row["id"]: row["name"] for row in rows}

    def _seed_type_name(self, type_id: Optional[str]) -> str:
        seed = find_seed_type(type_id)
        return seed.name if seed else ""

    def _seed_category_name(self, category_id: Optional[str]) -> str:
        seed = find_seed_category(category_id)
        return seed.name if seed else ""

    # Writer

    async def add_project(self, draft: ProjectDraft) -> Project:
        """
        Create a project with its credentials and payments.

        Raises:
            ValidationError: name or client missing (nothing is written)
            SchemaMismatchError: the projects table lacks a column
            StoreError: any other store failure; nothing is kept
        """
        draft.validate_for_create()

        type_id = self._classify(draft.project_type_id, IdKind.PROJECT_TYPE)
        category_id = self._classify(draft.project_category_id, IdKind.PROJECT_CATEGORY)
        project_row = self.mapper.to_insert_row(draft, store_key(type_id), store_key(category_id))

        async with self.store.transaction():
            record = await self._insert_project(project_row)
            project_id = record["id"]

            credential_rows = encode_credentials(
                project_id, draft.credentials, draft.hosting, draft.other_access
            )
            if credential_rows:
                await self.store.insert("project_credentials", credential_rows)

            payment_rows: List[Row] = []
            if draft.payments:
                payment_rows = await self.store.insert(
                    "payments", encode_payments(draft.payments, project_id)
                )

        logger.info(f"Created project {project_id} ({draft.name})")

        client_name = await self._client_name(draft.client_id)
        type_name, category_name = await self._type_names(
            type_id, category_id, draft.project_type, draft.project_category
        )

        project = self.mapper.to_domain(
            record,
            client_name=client_name,
            credentials=draft.credentials or Credential(),
            hosting=draft.hosting or Hosting(),
            other_access=draft.other_access or [],
            payments=decode_payments(payment_rows),
            project_type=type_name,
            project_category=category_name
        )
        # Seed selections are not stored but stay visible to the caller
        project.project_type_id = self._caller_id(type_id)
        project.project_category_id = self._caller_id(category_id)
        return project

    async def update_project(self, project_id: str, draft: ProjectDraft) -> Project:
        """
        Update the fields present in the draft.

        Main and hosting credentials are updated in place or inserted. Other
        access entries and payments are replaced as a whole when given; an
        empty list clears them and None leaves them untouched.

        Raises:
            EntityNotFoundError: no project with this id
            StoreError: the store failed; nothing is kept
        """
        type_id = self._classify(draft.project_type_id, IdKind.PROJECT_TYPE)
        category_id = self._classify(draft.project_category_id, IdKind.PROJECT_CATEGORY)
        values = self.mapper.to_update_row(draft, store_key(type_id), store_key(category_id))

        async with self.store.transaction():
            if values:
                updated = await self.store.update("projects", values, [eq("id", project_id)])
                record = updated[0] if updated else None
            else:
                record = await self.store.maybe_single("projects", [eq("id", project_id)])
            if record is None:
                raise EntityNotFoundError("Project", project_id)

            if draft.credentials is not None:
                await self._upsert_credential(
                    [eq("project_id", project_id), eq("platform", MAIN_PLATFORM)],
                    main_row(project_id, draft.credentials)
                )

            if draft.hosting is not None and draft.hosting.provider:
                await self._upsert_credential(
                    [eq("project_id", project_id), like("platform", HOSTING_PATTERN)],
                    hosting_row(project_id, draft.hosting)
                )

            if draft.other_access is not None:
                await self.store.delete("project_credentials", [
                    eq("project_id", project_id),
                    neq("platform", MAIN_PLATFORM),
                    not_like("platform", HOSTING_PATTERN),
                ])
                if draft.other_access:
                    await self.store.insert("project_credentials", [
                        other_access_row(project_id, access) for access in draft.other_access
                    ])

            if draft.payments is not None:
                await self.store.delete("payments", [eq("project_id", project_id)])
                if draft.payments:
                    await self.store.insert("payments", encode_payments(draft.payments, project_id))

        logger.info(f"Updated project {project_id}")

        client_name = await self._client_name(record.get("client_id"))
        payment_rows = await self.store.select("payments", [eq("project_id", project_id)])
        credential_rows = await self.store.select("project_credentials", [eq("project_id", project_id)])
        decoded = decode_credentials(credential_rows)

        stored_type = self._classify(record.get("project_type_id"), IdKind.PROJECT_TYPE)
        stored_category = self._classify(record.get("project_category_id"), IdKind.PROJECT_CATEGORY)
        type_name, category_name = await self._type_names(
            type_id if draft.project_type_id is not None else stored_type,
            category_id if draft.project_category_id is not None else stored_category,
            draft.project_type,
            draft.project_category
        )

        project = self.mapper.to_domain(
            record,
            client_name=client_name,
            credentials=decoded.main,
            hosting=decoded.hosting,
            other_access=decoded.other_access,
            payments=decode_payments(payment_rows),
            project_type=type_name,
            project_category=category_name
        )
        if draft.project_type_id is not None:
            project.project_type_id = self._caller_id(type_id)
        if draft.project_category_id is not None:
            project.project_category_id = self._caller_id(category_id)
        return project

    async def _insert_project(self, row: Row) -> Row:
        try:
            inserted = await self.store.insert("projects", row)
        except StoreError as e:
            if e.is_missing_column:
                logger.error(f"Database schema error: {e.message}")
                raise SchemaMismatchError("projects", e.message) from e
            raise
        return inserted[0]

    async def _upsert_credential(self, lookup: List[Filter], row: Row) -> None:
        existing = await self.store.maybe_single("project_credentials", lookup)
        if existing:
            values = {key: value for key, value in row.items() if key != "project_id"}
            await self.store.update("project_credentials", values, [eq("id", existing["id"])])
        else:
            await self.store.insert("project_credentials", row)

    def _classify(self, value: Optional[str], kind: IdKind) -> ClassifiedId:
        classified = classify_id(value, kind)
        if isinstance(classified, InvalidId) and classified.raw:
            logger.warning(f"Invalid {kind.value} id '{classified.raw}', it will not be stored")
        return classified

    def _caller_id(self, classified: ClassifiedId) -> Optional[str]:
        if isinstance(classified, (PersistedId, SeedId)):
            return classified.raw
        return None

    async def _client_name(self, client_id: Optional[str]) -> Optional[str]:
        if not client_id:
            return None
        names = await self._names_by_id("clients", [client_id])
        return names.get(client_id)

    async def _type_names(
        self,
        type_id: ClassifiedId,
        category_id: ClassifiedId,
        supplied_type: Optional[str],
        supplied_category: Optional[str]
    ) -> Tuple[str, str]:
        """Display names: caller-supplied first, then seed catalogue, then store."""
        type_name = supplied_type or ""
        if not type_name and isinstance(type_id, SeedId):
            type_name = self._seed_type_name(type_id.raw)
        if not type_name and isinstance(type_id, PersistedId):
            type_name = (await self._names_by_id("project_types", [type_id.raw])).get(type_id.raw, "")

        category_name = supplied_category or ""
        if not category_name and isinstance(category_id, SeedId):
            category_name = self._seed_category_name(category_id.raw)
        if not category_name and isinstance(category_id, PersistedId):
            category_name = (
                await self._names_by_id("project_categories", [category_id.raw])
            ).get(category_id.raw, "")

        return type_name, category_name
