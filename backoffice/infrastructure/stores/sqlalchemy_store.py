"""
Relational backing store on SQLAlchemy Core (async engine).
"""

import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import AsyncIterator, List, Optional, Sequence, Union
from uuid import uuid4

from sqlalchemy import MetaData, Table, select, insert, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from backoffice.domain.models.base import StoreError, utcnow
from backoffice.domain.repositories.store import BackingStore, Filter, FilterOp, Row
from backoffice.infrastructure.db.models import metadata as default_metadata


logger = logging.getLogger(__name__)


class SQLAlchemyStore(BackingStore):
    """
    Backing store over an async SQLAlchemy engine.

    Outside a transaction every call runs in its own short transaction.
    Inside ``transaction()`` calls made by the same task share one connection.
    """

    def __init__(self, engine: AsyncEngine, metadata: MetaData = default_metadata):
        self.engine = engine
        self.metadata = metadata
        self._connection: ContextVar[Optional[AsyncConnection]] = ContextVar(
            f"sqlalchemy_store_{id(self)}", default=None
        )

    def _table(self, name: str) -> Table:
        table = self.metadata.tables.get(name)
        if table is None:
            raise StoreError(f'relation "{name}" does not exist', name)
        return table

    def _column(self, table: Table, name: str):
        if name not in table.c:
            raise StoreError(f'column "{name}" of relation "{table.name}" does not exist', table.name)
        return table.c[name]

    def _where(self, table: Table, filters: Sequence[Filter]) -> list:
        clauses = []
        for f in filters:
            column = self._column(table, f.column)
            if f.op == FilterOp.EQ:
                clauses.append(column.is_(None) if f.value is None else column == f.value)
            elif f.op == FilterOp.NEQ:
                clauses.append(column.is_not(None) if f.value is None else column != f.value)
            elif f.op == FilterOp.LIKE:
                clauses.append(column.like(f.value))
            elif f.op == FilterOp.NOT_LIKE:
                clauses.append(column.not_like(f.value))
            elif f.op == FilterOp.IN:
                clauses.append(column.in_(list(f.value)))
        return clauses

    @asynccontextmanager
    async def _connect(self, table: str) -> AsyncIterator[AsyncConnection]:
        current = self._connection.get()
        try:
            if current is not None:
                yield current
            else:
                async with self.engine.begin() as conn:
                    yield conn
        except SQLAlchemyError as e:
            logger.debug(f"Store error on {table}: {e}")
            raise StoreError(str(getattr(e, "orig", None) or e), table) from e

    async def _fetch(self, conn: AsyncConnection, table: Table, clauses: list, order_by=None,
                     descending: bool = False, columns: Optional[Sequence[str]] = None) -> List[Row]:
        selected = [self._column(table, name) for name in columns] if columns else [table]
        stmt = select(*selected).where(*clauses)
        if order_by:
            column = self._column(table, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        result = await conn.execute(stmt)
        return [dict(row._mapping) for row in result]

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        columns: Optional[Sequence[str]] = None
    ) -> List[Row]:
        tbl = self._table(table)
        clauses = self._where(tbl, filters)
        async with self._connect(table) as conn:
            return await self._fetch(conn, tbl, clauses, order_by, descending, columns)

    async def insert(self, table: str, rows: Union[Row, Sequence[Row]]) -> List[Row]:
        tbl = self._table(table)
        batch = [rows] if isinstance(rows, dict) else list(rows)
        if not batch:
            return []

        now = utcnow()
        prepared = []
        for row in batch:
            values = dict(row)
            for name in values:
                self._column(tbl, name)
            if "id" in tbl.c and not values.get("id"):
                values["id"] = str(uuid4())
            for stamp in ("created_at", "updated_at"):
                if stamp in tbl.c and values.get(stamp) is None:
                    values[stamp] = now
            prepared.append(values)

        async with self._connect(table) as conn:
            # One statement per row; rows may carry different column sets
            for values in prepared:
                await conn.execute(insert(tbl).values(**values))
            ids = [values["id"] for values in prepared]
            stored = await self._fetch(conn, tbl, [tbl.c.id.in_(ids)])

        by_id = {row["id"]: row for row in stored}
        return [by_id[key] for key in ids if key in by_id]

    async def update(self, table: str, values: Row, filters: Sequence[Filter]) -> List[Row]:
        tbl = self._table(table)
        changes = dict(values)
        for name in changes:
            self._column(tbl, name)
        if "updated_at" in tbl.c:
            changes["updated_at"] = utcnow()
        clauses = self._where(tbl, filters)

        async with self._connect(table) as conn:
            result = await conn.execute(select(tbl.c.id).where(*clauses))
            ids = [row[0] for row in result]
            if not ids:
                return []
            await conn.execute(update(tbl).where(tbl.c.id.in_(ids)).values(**changes))
            return await self._fetch(conn, tbl, [tbl.c.id.in_(ids)])

    async def delete(self, table: str, filters: Sequence[Filter]) -> int:
        tbl = self._table(table)
        clauses = self._where(tbl, filters)
        async with self._connect(table) as conn:
            result = await conn.execute(delete(tbl).where(*clauses))
            return result.rowcount or 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._connection.get() is not None:
            yield
            return

        try:
            async with self.engine.begin() as conn:
                token = self._connection.set(conn)
                try:
                    yield
                finally:
                    self._connection.reset(token)
        except SQLAlchemyError as e:
            raise StoreError(str(getattr(e, "orig", None) or e)) from e

    async def close(self) -> None:
        await self.engine.dispose()
