"""
Generic table accessor over the Supabase query builder.

Guidelines:
- One accessor per remote table, parametrized by the record type rows map to
- One method per operation shape: filtered list, single row, insert-returning,
  update-returning, delete
- Every method issues exactly one request and awaits it
- A failed request is logged once here and returned as a failed StoreResult;
  it never propagates as an exception

Query shape:
- Filters: equality (ANDed), gt, ilike substring, not-null, and a substring
  match across several columns for free-text search
- Ordering by a single column, ascending or descending
- Optional row limit; no pagination or cursoring

Mapping:
- Rows arrive as dicts (``response.data``) and are validated into the record
  type with ``model_validate``; embedded relations are nested dicts
- A row that fails validation is reported like a failed request
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, Optional, Sequence, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError
from supabase import AsyncClient

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)
T = TypeVar("T")

# Failures of the remote call itself; anything else is a programming error
REMOTE_ERRORS = (APIError, httpx.HTTPError)
# A row the store returned that does not fit the record type
STORE_ERRORS = REMOTE_ERRORS + (ValidationError,)


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of one remote call: success-with-data or failure-with-reason."""

    data: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        if not self.ok or self.data is None:
            return default
        return self.data

    @classmethod
    def success(cls, data: T) -> StoreResult[T]:
        return cls(data=data)

    @classmethod
    def failure(cls, reason: str) -> StoreResult[T]:
        return cls(error=reason)


@dataclass(frozen=True)
class Filter:
    column: str
    value: Any = None
    op: str = "eq"
    columns: tuple[str, ...] = ()


def eq(column: str, value: Any) -> Filter:
    return Filter(column, value)


def gt(column: str, value: Any) -> Filter:
    return Filter(column, value, op="gt")


def ilike(column: str, term: str) -> Filter:
    """Case-insensitive substring match."""
    return Filter(column, term, op="ilike")


def not_null(column: str) -> Filter:
    return Filter(column, op="not_null")


def search(columns: Sequence[str], term: str) -> Filter:
    """Case-insensitive substring match on any of ``columns``."""
    return Filter(columns[0], term, op="search", columns=tuple(columns))


def by_id(row_id: Any, **scope: Any) -> list[Filter]:
    """Match one row by id, narrowed to the ``scope`` columns that are not None."""
    return [eq("id", row_id)] + [
        eq(column, value) for column, value in scope.items() if value is not None
    ]


def _describe_error(error: Exception) -> str:
    if isinstance(error, APIError):
        return error.message or str(error)
    if isinstance(error, ValidationError):
        return f"malformed {error.title} row ({error.error_count()} invalid fields)"
    return str(error) or type(error).__name__


def _apply_filters(builder: Any, filters: Iterable[Filter]) -> Any:
    for f in filters:
        if f.op == "eq":
            builder = builder.eq(f.column, f.value)
        elif f.op == "gt":
            builder = builder.gt(f.column, f.value)
        elif f.op == "ilike":
            builder = builder.ilike(f.column, f"%{f.value}%")
        elif f.op == "not_null":
            builder = builder.not_.is_(f.column, "null")
        elif f.op == "search":
            builder = builder.or_(
                ",".join(f"{column}.ilike.%{f.value}%" for column in f.columns)
            )
        else:
            raise ValueError(f"Unsupported filter operator: {f.op}")
    return builder


class TableAccessor(Generic[R]):
    """
    Typed access to one remote table.

    Args:
        client: Supabase async client (injected by DI container)
        table: Remote table name
        record: Record type rows are validated into
    """

    def __init__(self, client: AsyncClient, table: str, record: type[R]):
        self._client = client
        self.table = table
        self.record = record

    def _to_record(self, row: Mapping[str, Any]) -> R:
        return self.record.model_validate(row)

    def _failed(self, action: str, error: Exception) -> StoreResult:
        reason = _describe_error(error)
        logger.error(f"Error {action}: {reason}")
        return StoreResult.failure(reason)

    async def select_many(
        self,
        *filters: Filter,
        action: str,
        columns: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> StoreResult[list[R]]:
        """Filtered list read."""
        try:
            builder = _apply_filters(
                self._client.table(self.table).select(columns), filters
            )
            if order_by:
                builder = builder.order(order_by, desc=descending)
            if limit is not None:
                builder = builder.limit(limit)
            response = await builder.execute()
            records = [self._to_record(row) for row in response.data or []]
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success(records)

    async def select_values(
        self, column: str, *filters: Filter, action: str
    ) -> StoreResult[list[Any]]:
        """Read a single column as plain values (no record mapping)."""
        try:
            builder = _apply_filters(self._client.table(self.table).select(column), filters)
            response = await builder.execute()
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success([row.get(column) for row in response.data or []])

    async def select_one(
        self,
        *filters: Filter,
        action: str,
        columns: str = "*",
        maybe: bool = False,
    ) -> StoreResult[Optional[R]]:
        """
        Single-row read.

        With ``maybe=False`` exactly one row must match (zero rows is a failure
        reported by the store); with ``maybe=True`` zero rows is a successful
        ``None``.
        """
        try:
            builder = _apply_filters(
                self._client.table(self.table).select(columns), filters
            )
            builder = builder.maybe_single() if maybe else builder.single()
            response = await builder.execute()
            # maybe_single() yields no response at all when nothing matched
            if response is None or not response.data:
                return StoreResult.success(None)
            record = self._to_record(response.data)
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success(record)

    async def insert_one(self, values: Mapping[str, Any], *, action: str) -> StoreResult[Optional[R]]:
        """Insert one row and return it as stored."""
        try:
            response = await self._client.table(self.table).insert(dict(values)).execute()
            rows = response.data or []
            record = self._to_record(rows[0]) if rows else None
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success(record)

    async def update_one(
        self, values: Mapping[str, Any], *filters: Filter, action: str
    ) -> StoreResult[Optional[R]]:
        """Update matching rows and return the first one as stored."""
        result = await self.update_many(values, *filters, action=action)
        if not result.ok:
            return StoreResult.failure(result.error)
        rows = result.data or []
        return StoreResult.success(rows[0] if rows else None)

    async def update_many(
        self, values: Mapping[str, Any], *filters: Filter, action: str
    ) -> StoreResult[list[R]]:
        if not filters:
            raise ValueError(f"Refusing unfiltered update on {self.table}")
        try:
            builder = _apply_filters(
                self._client.table(self.table).update(dict(values)), filters
            )
            response = await builder.execute()
            records = [self._to_record(row) for row in response.data or []]
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success(records)

    async def delete(self, *filters: Filter, action: str) -> StoreResult[bool]:
        if not filters:
            raise ValueError(f"Refusing unfiltered delete on {self.table}")
        try:
            builder = _apply_filters(self._client.table(self.table).delete(), filters)
            await builder.execute()
        except STORE_ERRORS as e:
            return self._failed(action, e)
        return StoreResult.success(True)
