"""
In-memory backing store.
Keeps every table as an ordered dict of rows keyed by id. Used for demo mode,
offline work and tests.
"""

import copy
import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from uuid import uuid4

from backoffice.domain.models.base import StoreError, utcnow
from backoffice.domain.repositories.store import BackingStore, Filter, Row
from backoffice.infrastructure.db.models import table_columns


logger = logging.getLogger(__name__)

# Per table: key order when first touched, and each touched row as it was
# before (None when the row did not exist)
Journal = Dict[str, Tuple[List[str], Dict[str, Optional[Row]]]]


DEMO_CLIENTS: List[Row] = [
    {"id": "5b0f4f4e-3c1a-4d7e-9a51-0c7f5e2d8a11", "name": "Acme Corp", "email": "billing@acme.example"},
    {"id": "8e2d6c3b-7a49-4f10-b2c6-91d3a4e5f622", "name": "Globex Ltd", "email": "accounts@globex.example"},
    {"id": "c4a7e9d2-1b38-4e56-8f0a-2d6b7c9e1f33", "name": "Initech", "email": "ap@initech.example"},
]


class InMemoryStore(BackingStore):
    """
    Backing store held in process memory.

    Args:
        schema: Column names per table; defaults to the relational schema
        seed: Rows to preload, per table
    """

    def __init__(
        self,
        schema: Optional[Mapping[str, Iterable[str]]] = None,
        seed: Optional[Mapping[str, Sequence[Row]]] = None
    ):
        source = schema if schema is not None else table_columns()
        self._schema: Dict[str, frozenset] = {
            name: frozenset(columns) for name, columns in source.items()
        }
        self._tables: Dict[str, Dict[str, Row]] = {name: {} for name in self._schema}
        self._journal: ContextVar[Optional[Journal]] = ContextVar(
            f"memory_store_{id(self)}", default=None
        )

        for table, rows in (seed or {}).items():
            for row in rows:
                self._insert_row(table, row)

    @classmethod
    def with_demo_data(cls) -> "InMemoryStore":
        """Store preloaded with a few sample clients."""
        return cls(seed={"clients": DEMO_CLIENTS})

    def _columns(self, table: str) -> frozenset:
        try:
            return self._schema[table]
        except KeyError:
            raise StoreError(f'relation "{table}" does not exist', table)

    def _check_columns(self, table: str, names: Iterable[str]) -> None:
        columns = self._columns(table)
        for name in names:
            if name not in columns:
                raise StoreError(f'column "{name}" of relation "{table}" does not exist', table)

    def _insert_row(self, table: str, values: Row) -> Row:
        self._check_columns(table, values.keys())
        columns = self._columns(table)
        now = utcnow()

        row: Row = {name: None for name in columns}
        row.update(values)
        if "id" in columns and not row.get("id"):
            row["id"] = str(uuid4())
        if "created_at" in columns and row.get("created_at") is None:
            row["created_at"] = now
        if "updated_at" in columns and row.get("updated_at") is None:
            row["updated_at"] = now

        key = row.get("id") or str(uuid4())
        if key in self._tables[table]:
            raise StoreError(f'duplicate key value violates unique constraint "{table}_pkey"', table)
        self._remember(table, key)
        self._tables[table][key] = row
        return dict(row)

    def _matching(self, table: str, filters: Sequence[Filter]) -> List[Row]:
        self._check_columns(table, (f.column for f in filters))
        return [
            row for row in self._tables[table].values()
            if all(f.matches(row) for f in filters)
        ]

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        columns: Optional[Sequence[str]] = None
    ) -> List[Row]:
        rows = self._matching(table, filters)

        if order_by:
            self._check_columns(table, [order_by])
            present = [row for row in rows if row.get(order_by) is not None]
            missing = [row for row in rows if row.get(order_by) is None]
            present.sort(key=lambda row: row[order_by], reverse=descending)
            rows = present + missing

        if columns:
            self._check_columns(table, columns)
            return [{name: row.get(name) for name in columns} for row in rows]
        return [dict(row) for row in rows]

    async def insert(self, table: str, rows: Union[Row, Sequence[Row]]) -> List[Row]:
        batch = [rows] if isinstance(rows, dict) else list(rows)
        # Validate the whole batch before touching the table
        for row in batch:
            self._check_columns(table, row.keys())
        return [self._insert_row(table, row) for row in batch]

    async def update(self, table: str, values: Row, filters: Sequence[Filter]) -> List[Row]:
        self._check_columns(table, values.keys())
        changes = dict(values)
        if "updated_at" in self._columns(table):
            changes["updated_at"] = utcnow()

        updated = []
        self._check_columns(table, (f.column for f in filters))
        for key, row in self._tables[table].items():
            if all(f.matches(row) for f in filters):
                self._remember(table, key)
                row.update(changes)
                updated.append(dict(row))
        return updated

    async def delete(self, table: str, filters: Sequence[Filter]) -> int:
        self._check_columns(table, (f.column for f in filters))
        kept = {}
        for key, row in self._tables[table].items():
            if all(f.matches(row) for f in filters):
                self._remember(table, key)
            else:
                kept[key] = row
        removed = len(self._tables[table]) - len(kept)
        self._tables[table] = kept
        return removed

    def _remember(self, table: str, key: str) -> None:
        """Record a row before its first change inside the current transaction."""
        journal = self._journal.get()
        if journal is None:
            return
        if table not in journal:
            journal[table] = (list(self._tables[table]), {})
        previous = journal[table][1]
        if key not in previous:
            row = self._tables[table].get(key)
            previous[key] = copy.deepcopy(row) if row is not None else None

    def _undo(self, journal: Journal) -> None:
        for table, (order, previous) in journal.items():
            rows = self._tables[table]
            for key, row in previous.items():
                if row is None:
                    rows.pop(key, None)
                else:
                    rows[key] = row
            # Restore the original order; rows added meanwhile by others go last
            rank = {key: index for index, key in enumerate(order)}
            self._tables[table] = dict(
                sorted(rows.items(), key=lambda item: rank.get(item[0], len(order)))
            )

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Undo this task's changes if the block raises.
        Nested blocks join the outer transaction; each task has its own journal.
        """
        if self._journal.get() is not None:
            yield
            return

        journal: Journal = {}
        token = self._journal.set(journal)
        try:
            yield
        except BaseException:
            logger.debug("Rolling back in-memory transaction")
            self._undo(journal)
            raise
        finally:
            self._journal.reset(token)

    def dump(self, table: str) -> List[Dict[str, Any]]:
        """Copy of every row of a table, in insertion order."""
        self._columns(table)
        return [dict(row) for row in self._tables[table].values()]
