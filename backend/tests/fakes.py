"""
In-memory stand-in for the Supabase async client.

Supports the query-builder subset the repositories use:
table().select/insert/update/delete, eq/gt/ilike/or_/not_.is_, order, limit,
single/maybe_single and an awaitable execute(). Embedded relations in a
select ("*, destinations(*)") are resolved by naming convention:
    many-to-one  row["destination_id"]           -> destinations row
    one-to-many  child["itinerary_id"] == row.id -> itinerary_destinations rows
                 (relations named after the parent table, "<parent>_...")

Failures are injected per table with fail_table(); they raise the same
postgrest APIError the real client raises.
"""

import copy
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from dishka import Provider, Scope, provide
from postgrest.exceptions import APIError
from supabase import AsyncClient

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@dataclass
class FakeResponse:
    data: Any
    count: Optional[int] = None


def _singular(table: str) -> str:
    if table.endswith("ies"):
        return table[:-3] + "y"
    if table.endswith("s"):
        return table[:-1]
    return table


def _split_columns(columns: str) -> list[str]:
    parts, depth, current = [], 0, ""
    for char in columns:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            parts.append(current.strip())
            current = ""
        else:
            current += char
    if current.strip():
        parts.append(current.strip())
    return parts


def _ilike(value: Any, pattern: str) -> bool:
    if value is None:
        return False
    return pattern.strip("%").lower() in str(value).lower()


class _Negation:
    def __init__(self, query: "FakeQuery"):
        self._query = query

    def is_(self, column: str, value: str) -> "FakeQuery":
        assert value == "null", "only not.is.null is supported"
        return self._query._where(lambda row: row.get(column) is not None)


class FakeQuery:
    def __init__(self, store: "FakeStore", table: str):
        self._store = store
        self._table = table
        self._operation = "select"
        self._columns = "*"
        self._values: Any = None
        self._filters: list[Callable[[dict], bool]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._limit: Optional[int] = None
        self._single: Optional[str] = None

    # ---- operations ----

    def select(self, columns: str = "*") -> "FakeQuery":
        self._operation, self._columns = "select", columns
        return self

    def insert(self, values: Any) -> "FakeQuery":
        self._operation, self._values = "insert", values
        return self

    def update(self, values: dict) -> "FakeQuery":
        self._operation, self._values = "update", values
        return self

    def delete(self) -> "FakeQuery":
        self._operation = "delete"
        return self

    # ---- filters ----

    def _where(self, predicate: Callable[[dict], bool]) -> "FakeQuery":
        self._filters.append(predicate)
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        return self._where(lambda row: row.get(column) == value)

    def gt(self, column: str, value: Any) -> "FakeQuery":
        return self._where(lambda row: row.get(column) is not None and row[column] > value)

    def ilike(self, column: str, pattern: str) -> "FakeQuery":
        return self._where(lambda row: _ilike(row.get(column), pattern))

    def or_(self, expression: str) -> "FakeQuery":
        clauses = []
        for clause in expression.split(","):
            column, operator, pattern = clause.split(".", 2)
            assert operator == "ilike", "only ilike is supported inside or()"
            clauses.append((column, pattern))
        return self._where(
            lambda row: any(_ilike(row.get(column), pattern) for column, pattern in clauses)
        )

    @property
    def not_(self) -> _Negation:
        return _Negation(self)

    # ---- modifiers ----

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    def single(self) -> "FakeQuery":
        self._single = "single"
        return self

    def maybe_single(self) -> "FakeQuery":
        self._single = "maybe"
        return self

    # ---- execution ----

    def _matches(self, row: dict) -> bool:
        return all(predicate(row) for predicate in self._filters)

    def _project(self, row: dict) -> dict:
        result: dict[str, Any] = {}
        for part in _split_columns(self._columns):
            if part == "*":
                result.update(copy.deepcopy(row))
            elif "(" in part:
                relation = part[: part.index("(")].strip()
                result[relation] = self._embed(row, relation)
            else:
                result[part] = copy.deepcopy(row.get(part))
        return result

    def _embed(self, row: dict, relation: str) -> Any:
        related = self._store.tables.get(relation, [])
        parent = _singular(self._table)
        if relation.startswith(f"{parent}_"):
            parent_key = f"{parent}_id"
            return [
                copy.deepcopy(child) for child in related if child.get(parent_key) == row["id"]
            ]
        foreign_key = f"{_singular(relation)}_id"
        for candidate in related:
            if row.get(foreign_key) is not None and candidate.get("id") == row[foreign_key]:
                return copy.deepcopy(candidate)
        return None

    async def execute(self) -> Optional[FakeResponse]:
        self._store.requests.append((self._table, self._operation))
        failure = self._store.failures.get(self._table)
        if failure is not None:
            raise APIError({"message": failure, "code": "500", "hint": None, "details": None})
        rows = self._store.tables.setdefault(self._table, [])

        if self._operation == "insert":
            values = self._values if isinstance(self._values, list) else [self._values]
            created = [self._store.stamp(dict(value)) for value in values]
            rows.extend(created)
            return FakeResponse(data=copy.deepcopy(created))

        matched = [row for row in rows if self._matches(row)]

        if self._operation == "update":
            for row in matched:
                row.update(copy.deepcopy(self._values))
            return FakeResponse(data=copy.deepcopy(matched))

        if self._operation == "delete":
            self._store.tables[self._table] = [row for row in rows if row not in matched]
            return FakeResponse(data=copy.deepcopy(matched))

        if self._order is not None:
            column, desc = self._order
            present = [row for row in matched if row.get(column) is not None]
            missing = [row for row in matched if row.get(column) is None]
            matched = sorted(present, key=lambda row: row[column], reverse=desc) + missing
        if self._limit is not None:
            matched = matched[: self._limit]
        data = [self._project(row) for row in matched]

        if self._single == "single":
            if len(data) != 1:
                raise APIError(
                    {
                        "message": "JSON object requested, multiple (or no) rows returned",
                        "code": "PGRST116",
                        "hint": None,
                        "details": f"The result contains {len(data)} rows",
                    }
                )
            return FakeResponse(data=data[0])
        if self._single == "maybe":
            if not data:
                return None
            return FakeResponse(data=data[0])
        return FakeResponse(data=data)


class FakeFunctions:
    """Records edge function calls and answers with canned responses."""

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self.responses: dict[str, Any] = {}
        self.errors: dict[str, Exception] = {}

    async def invoke(self, function_name: str, invoke_options: Optional[dict] = None) -> Any:
        options = invoke_options or {}
        self.calls.append((function_name, options.get("body")))
        if function_name in self.errors:
            raise self.errors[function_name]
        return self.responses.get(function_name, {})


class FakeStore:
    def __init__(self, **tables: list[dict]):
        self.tables: dict[str, list[dict]] = {
            name: [dict(row) for row in rows] for name, rows in tables.items()
        }
        self.failures: dict[str, str] = {}
        self.requests: list[tuple[str, str]] = []
        self.functions = FakeFunctions()
        self._clock = 0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def stamp(self, row: dict) -> dict:
        """Fill in id and timestamps the way the database defaults would."""
        self._clock += 1
        now = (BASE_TIME + timedelta(seconds=self._clock)).isoformat()
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", now)
        row.setdefault("updated_at", now)
        return row

    def fail_table(self, table: str, message: str = "connection refused") -> None:
        self.failures[table] = message

    def recover(self, table: str) -> None:
        self.failures.pop(table, None)

    def rows(self, table: str) -> list[dict]:
        return self.tables.get(table, [])


class FakeStoreProvider(Provider):
    """Serves a FakeStore wherever the app asks for the Supabase client."""

    def __init__(self, store: FakeStore):
        super().__init__()
        self.store = store

    @provide(scope=Scope.APP)
    def get_store_client(self) -> AsyncClient:
        return self.store
