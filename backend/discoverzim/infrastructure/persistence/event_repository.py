"""Event Repository - the `events` table."""

from datetime import datetime, timezone
from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.event import Event, EventInput, EventUpdate
from discoverzim.infrastructure.persistence.table_accessor import (
    TableAccessor,
    eq,
    gt,
    search,
)


class EventRepository:
    _table: TableAccessor[Event]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "events", Event)

    async def get_events(self) -> list[Event]:
        result = await self._table.select_many(action="fetching events")
        return result.unwrap_or([])

    async def get_event(self, event_id: str) -> Optional[Event]:
        result = await self._table.select_one(
            eq("id", event_id), action=f"fetching event with id {event_id}"
        )
        return result.unwrap_or(None)

    async def get_upcoming_events(self, now: Optional[datetime] = None) -> list[Event]:
        """Events starting after ``now`` (default: current UTC time), soonest first."""
        now = now or datetime.now(timezone.utc)
        result = await self._table.select_many(
            gt("start_date", now.isoformat()),
            order_by="start_date",
            action="fetching upcoming events",
        )
        return result.unwrap_or([])

    async def search_events(self, query: str) -> list[Event]:
        result = await self._table.select_many(
            search(("title", "location", "description"), query),
            action="searching events",
        )
        return result.unwrap_or([])

    async def add_event(self, event: EventInput) -> Optional[Event]:
        result = await self._table.insert_one(event.to_row(), action="adding event")
        return result.unwrap_or(None)

    async def update_event(self, event_id: str, updates: EventUpdate) -> Optional[Event]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", event_id),
            action=f"updating event with id {event_id}",
        )
        return result.unwrap_or(None)

    async def delete_event(self, event_id: str) -> bool:
        result = await self._table.delete(
            eq("id", event_id), action=f"deleting event with id {event_id}"
        )
        return result.unwrap_or(False)
