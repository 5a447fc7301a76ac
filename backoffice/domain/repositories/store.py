"""
Backing store port.
A minimal relational interface over named tables and plain row dictionaries.
Repositories are written against this interface so the data source (in-memory
arena or relational database) is chosen at startup.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncContextManager, Dict, Iterable, List, Optional, Sequence, Union

from backoffice.domain.models.base import MultipleRowsError


Row = Dict[str, Any]


class FilterOp(str, Enum):
    """Supported filter operators."""
    EQ = "eq"
    NEQ = "neq"
    LIKE = "like"
    NOT_LIKE = "not_like"
    IN = "in"


@dataclass(frozen=True)
class Filter:
    """A single column predicate. Filters in a list are AND-ed."""

    column: str
    op: FilterOp
    value: Any

    def matches(self, row: Row) -> bool:
        """Evaluate the predicate against a row held in memory."""
        actual = row.get(self.column)
        if self.op == FilterOp.EQ:
            return actual is None if self.value is None else actual == self.value
        if actual is None:
            # SQL semantics: NULL only matches IS NULL
            return False
        if self.op == FilterOp.NEQ:
            return actual != self.value
        if self.op == FilterOp.IN:
            return actual in tuple(self.value)
        matched = like_to_regex(self.value).match(str(actual)) is not None
        return matched if self.op == FilterOp.LIKE else not matched


def like_to_regex(pattern: str) -> "re.Pattern[str]":
    """Translate a SQL LIKE pattern (% and _) to a compiled regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("^" + "".join(parts) + "$", re.DOTALL)


def eq(column: str, value: Any) -> Filter:
    return Filter(column, FilterOp.EQ, value)


def neq(column: str, value: Any) -> Filter:
    return Filter(column, FilterOp.NEQ, value)


def like(column: str, pattern: str) -> Filter:
    return Filter(column, FilterOp.LIKE, pattern)


def not_like(column: str, pattern: str) -> Filter:
    return Filter(column, FilterOp.NOT_LIKE, pattern)


def in_(column: str, values: Iterable[Any]) -> Filter:
    return Filter(column, FilterOp.IN, tuple(values))


class BackingStore(ABC):
    """
    Relational backing store.

    Stores assign ``id``, ``created_at`` and ``updated_at`` on insert when the
    table has those columns, and refresh ``updated_at`` on update. Failures are
    raised as StoreError; a column the table does not have is reported with a
    message containing 'column ... does not exist'.
    """

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        columns: Optional[Sequence[str]] = None
    ) -> List[Row]:
        """Fetch matching rows."""
        pass

    async def maybe_single(self, table: str, filters: Sequence[Filter] = ()) -> Optional[Row]:
        """
        Fetch zero or one row.
        Raises MultipleRowsError if the filters match more than one row.
        """
        rows = await self.select(table, filters)
        if len(rows) > 1:
            raise MultipleRowsError(table, len(rows))
        return rows[0] if rows else None

    @abstractmethod
    async def insert(self, table: str, rows: Union[Row, Sequence[Row]]) -> List[Row]:
        """Insert one or more rows and return them as stored."""
        pass

    @abstractmethod
    async def update(self, table: str, values: Row, filters: Sequence[Filter]) -> List[Row]:
        """Update matching rows and return them as stored."""
        pass

    @abstractmethod
    async def delete(self, table: str, filters: Sequence[Filter]) -> int:
        """Delete matching rows and return how many were removed."""
        pass

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """
        Unit of work. Everything done inside commits together or is rolled
        back when the block raises. Nested blocks join the outer one.
        """
        pass

    async def close(self) -> None:
        """Release resources held by the store."""
        return None
