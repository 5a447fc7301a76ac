"""
Unit tests for the project aggregate repository.
"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import Mock

from backoffice.domain.models.base import (
    ValidationError, SchemaMismatchError, StoreError, EntityNotFoundError
)
from backoffice.domain.models.project import (
    ProjectDraft, Credential, Hosting, OtherAccess, OtherAccessType, Payment, PaymentStatus
)
from backoffice.domain.models.status import ProjectStatus
from backoffice.domain.repositories.store import BackingStore
from backoffice.infrastructure.db.models import table_columns
from backoffice.infrastructure.repositories.project_repository import StoreProjectRepository
from backoffice.infrastructure.stores.memory_store import InMemoryStore, DEMO_CLIENTS


ACME_ID = DEMO_CLIENTS[0]["id"]


def full_draft(**overrides) -> ProjectDraft:
    values = dict(
        name="Acme Site",
        client_id=ACME_ID,
        price=1500,
        status="planning",
        credentials=Credential(username="admin", password="secret"),
        hosting=Hosting(provider="aws", credentials=Credential(username="root", password="pw")),
        other_access=[OtherAccess(type=OtherAccessType.FTP, name="server1",
                                  credentials=Credential(username="ftp", password="ftp-pw"))],
        payments=[
            Payment(amount=500, date=date(2024, 1, 10), status=PaymentStatus.COMPLETED, currency="USD"),
            Payment(amount=1000, date=date(2024, 3, 1), status=PaymentStatus.PENDING, currency="USD"),
        ],
    )
    values.update(overrides)
    return ProjectDraft(**values)


class TestAddProject:
    """Test cases for creating project aggregates."""

    def setup_method(self):
        self.store = InMemoryStore.with_demo_data()
        self.repository = StoreProjectRepository(self.store)

    @pytest.mark.asyncio
    async def test_acme_site_scenario(self):
        draft = ProjectDraft(
            name="Acme Site",
            client_id=ACME_ID,
            price=1500,
            status="planning",
            payments=[Payment(amount=500, status=PaymentStatus.COMPLETED, currency="USD")],
        )

        project = await self.repository.add_project(draft)

        assert project.id
        assert project.status == ProjectStatus.ACTIVE
        assert project.original_status == "planning"
        assert len(project.payments) == 1
        assert project.payments[0].amount == 500
        assert project.client_name == "Acme Corp"
        assert project.price == 1500

        [row] = self.store.dump("projects")
        assert row["status"] == "active"
        assert row["original_status"] == "planning"
        assert row["start_date"] == ""
        assert len(self.store.dump("payments")) == 1

    @pytest.mark.asyncio
    async def test_writes_credential_rows(self):
        project = await self.repository.add_project(full_draft())

        platforms = sorted(row["platform"] for row in self.store.dump("project_credentials"))
        assert platforms == ["ftp-server1", "hosting-aws", "main"]
        assert project.credentials.username == "admin"
        assert project.hosting.provider == "aws"
        assert [a.name for a in project.other_access] == ["server1"]
        assert [p.amount for p in project.payments] == [1000, 500]

    @pytest.mark.asyncio
    async def test_missing_name_touches_no_store(self):
        store = Mock(spec=BackingStore)
        repository = StoreProjectRepository(store)

        with pytest.raises(ValidationError) as exc_info:
            await repository.add_project(ProjectDraft(client_id=ACME_ID))

        assert exc_info.value.field == "name"
        assert store.method_calls == []

    @pytest.mark.asyncio
    async def test_missing_url_column_is_a_schema_error(self):
        schema = dict(table_columns())
        schema["projects"] = schema["projects"] - {"url"}
        store = InMemoryStore(schema=schema, seed={"clients": DEMO_CLIENTS})
        repository = StoreProjectRepository(store)

        with pytest.raises(SchemaMismatchError) as exc_info:
            await repository.add_project(full_draft())

        error = exc_info.value
        assert error.code == "SCHEMA_MISMATCH"
        assert error.message.startswith("The database schema needs to be updated")
        assert not isinstance(error, ValidationError)
        assert "url" in error.detail
        assert store.dump("projects") == []

    @pytest.mark.asyncio
    async def test_dependent_failure_rolls_back_everything(self):
        schema = dict(table_columns())
        schema["payments"] = schema["payments"] - {"currency"}
        store = InMemoryStore(schema=schema, seed={"clients": DEMO_CLIENTS})
        repository = StoreProjectRepository(store)

        with pytest.raises(StoreError):
            await repository.add_project(full_draft())

        assert store.dump("projects") == []
        assert store.dump("project_credentials") == []
        assert store.dump("payments") == []

    @pytest.mark.asyncio
    async def test_seed_type_ids_are_not_stored(self):
        project = await self.repository.add_project(
            full_draft(project_type_id="type-1", project_category_id="cat-2")
        )

        [row] = self.store.dump("projects")
        assert row["project_type_id"] is None
        assert row["project_category_id"] is None
        assert project.project_type_id == "type-1"
        assert project.project_category_id == "cat-2"
        assert project.project_type == "WordPress"
        assert project.project_category == "Blog"

    @pytest.mark.asyncio
    async def test_invalid_type_id_is_dropped(self):
        project = await self.repository.add_project(full_draft(project_type_id="abc"))

        assert self.store.dump("projects")[0]["project_type_id"] is None
        assert project.project_type_id is None
        assert project.project_type == ""

    @pytest.mark.asyncio
    async def test_persisted_type_id_is_stored(self):
        [project_type] = await self.store.insert("project_types", {"name": "Headless CMS"})

        project = await self.repository.add_project(full_draft(project_type_id=project_type["id"]))

        assert self.store.dump("projects")[0]["project_type_id"] == project_type["id"]
        assert project.project_type == "Headless CMS"

    @pytest.mark.asyncio
    async def test_unknown_client(self):
        project = await self.repository.add_project(
            full_draft(client_id="0b9f2f3e-1c2d-4e5f-8a9b-0c1d2e3f4a5b")
        )
        assert project.client_name == "Unknown Client"


class TestReadProjects:
    """Test cases for listing and fetching project aggregates."""

    def setup_method(self):
        self.store = InMemoryStore.with_demo_data()
        self.repository = StoreProjectRepository(self.store)

    @pytest.mark.asyncio
    async def test_empty_list(self):
        assert await self.repository.list_projects() == []

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self):
        await self.store.insert("projects", [
            {"name": "Old", "client_id": ACME_ID, "status": "active",
             "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc)},
            {"name": "New", "client_id": DEMO_CLIENTS[1]["id"], "status": "completed",
             "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc)},
        ])

        projects = await self.repository.list_projects()

        assert [p.name for p in projects] == ["New", "Old"]
        assert [p.client_name for p in projects] == ["Globex Ltd", "Acme Corp"]
        assert projects[0].status == ProjectStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_get_project_round_trip(self):
        created = await self.repository.add_project(full_draft(project_category_id="cat-6"))

        project = await self.repository.get_project_by_id(created.id)

        assert project.name == "Acme Site"
        assert project.credentials == Credential(username="admin", password="secret")
        assert project.hosting.provider == "aws"
        assert project.hosting.credentials.username == "root"
        assert project.other_access[0].type == OtherAccessType.FTP
        assert project.other_access[0].id
        assert [p.date for p in project.payments] == [date(2024, 3, 1), date(2024, 1, 10)]
        assert project.project_category == ""

    @pytest.mark.asyncio
    async def test_get_missing_project(self):
        assert await self.repository.get_project_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_stored_type_names_are_resolved(self):
        [project_type] = await self.store.insert("project_types", {"name": "Shop"})
        await self.store.insert("projects", {
            "name": "Store", "client_id": ACME_ID, "status": "active",
            "project_type_id": project_type["id"]
        })

        [project] = await self.repository.list_projects()

        assert project.project_type == "Shop"


class TestUpdateProject:
    """Test cases for partial updates of project aggregates."""

    def setup_method(self):
        self.store = InMemoryStore.with_demo_data()
        self.repository = StoreProjectRepository(self.store)

    async def create(self, **overrides):
        return await self.repository.add_project(full_draft(**overrides))

    @pytest.mark.asyncio
    async def test_omitted_payments_are_kept(self):
        created = await self.create()

        project = await self.repository.update_project(created.id, ProjectDraft(name="Renamed"))

        assert project.name == "Renamed"
        assert len(self.store.dump("payments")) == 2
        assert len(project.payments) == 2

    @pytest.mark.asyncio
    async def test_empty_payments_clear_them(self):
        created = await self.create()

        project = await self.repository.update_project(created.id, ProjectDraft(payments=[]))

        assert self.store.dump("payments") == []
        assert project.payments == []

    @pytest.mark.asyncio
    async def test_payments_are_replaced(self):
        created = await self.create()

        project = await self.repository.update_project(
            created.id, ProjectDraft(payments=[Payment(amount=42, date=date(2024, 4, 1))])
        )

        assert [p.amount for p in project.payments] == [42]
        assert len(self.store.dump("payments")) == 1

    @pytest.mark.asyncio
    async def test_other_access_replaced_without_touching_main_and_hosting(self):
        created = await self.create()

        project = await self.repository.update_project(
            created.id,
            ProjectDraft(other_access=[OtherAccess(type=OtherAccessType.SSH, name="box")])
        )

        platforms = sorted(row["platform"] for row in self.store.dump("project_credentials"))
        assert platforms == ["hosting-aws", "main", "ssh-box"]
        assert [a.name for a in project.other_access] == ["box"]
        assert project.credentials.username == "admin"

    @pytest.mark.asyncio
    async def test_omitted_other_access_is_kept(self):
        created = await self.create()

        await self.repository.update_project(created.id, ProjectDraft(description="New text"))

        assert len(self.store.dump("project_credentials")) == 3

    @pytest.mark.asyncio
    async def test_main_credentials_updated_in_place(self):
        created = await self.create()

        project = await self.repository.update_project(
            created.id, ProjectDraft(credentials=Credential(username="new", password="pw2"))
        )

        main_rows = [r for r in self.store.dump("project_credentials") if r["platform"] == "main"]
        assert len(main_rows) == 1
        assert main_rows[0]["username"] == "new"
        assert project.credentials.password == "pw2"

    @pytest.mark.asyncio
    async def test_hosting_inserted_when_missing(self):
        created = await self.create(hosting=None)

        project = await self.repository.update_project(
            created.id,
            ProjectDraft(hosting=Hosting(provider="netlify", credentials=Credential(username="n")))
        )

        assert project.hosting.provider == "netlify"
        hosting_rows = [r for r in self.store.dump("project_credentials")
                        if r["platform"].startswith("hosting-")]
        assert len(hosting_rows) == 1

    @pytest.mark.asyncio
    async def test_hosting_provider_change_updates_the_row(self):
        created = await self.create()

        project = await self.repository.update_project(
            created.id, ProjectDraft(hosting=Hosting(provider="gcp"))
        )

        hosting_rows = [r for r in self.store.dump("project_credentials")
                        if r["platform"].startswith("hosting-")]
        assert [r["platform"] for r in hosting_rows] == ["hosting-gcp"]
        assert project.hosting.provider == "gcp"

    @pytest.mark.asyncio
    async def test_status_update(self):
        created = await self.create()

        project = await self.repository.update_project(created.id, ProjectDraft(status="in-progress"))

        assert project.status == ProjectStatus.ACTIVE
        assert project.original_status == "in-progress"
        assert project.display_status == "In Progress"

    @pytest.mark.asyncio
    async def test_seed_type_kept_for_caller(self):
        created = await self.create()

        project = await self.repository.update_project(created.id, ProjectDraft(project_type_id="type-2"))

        assert project.project_type_id == "type-2"
        assert project.project_type == "Shopify"
        assert self.store.dump("projects")[0]["project_type_id"] is None

    @pytest.mark.asyncio
    async def test_missing_project(self):
        with pytest.raises(EntityNotFoundError):
            await self.repository.update_project("missing", ProjectDraft(name="X"))

        with pytest.raises(EntityNotFoundError):
            await self.repository.update_project("missing", ProjectDraft())

    @pytest.mark.asyncio
    async def test_failed_update_keeps_previous_state(self):
        created = await self.create()
        schema = dict(table_columns())
        schema["payments"] = schema["payments"] - {"currency"}

        # Re-home the existing rows into a store whose payments table rejects inserts
        broken = InMemoryStore(schema=schema, seed={
            "clients": DEMO_CLIENTS,
            "projects": self.store.dump("projects"),
            "project_credentials": self.store.dump("project_credentials"),
        })
        repository = StoreProjectRepository(broken)

        with pytest.raises(StoreError):
            await repository.update_project(
                created.id, ProjectDraft(name="Renamed", payments=[Payment(amount=1)])
            )

        assert broken.dump("projects")[0]["name"] == "Acme Site"
