"""
Destination Repository.

Reads and administers the `destinations` table. Write payloads normalise
array columns so the store never receives null for them.
"""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.destination import (
    Destination,
    DestinationInput,
    DestinationUpdate,
)
from discoverzim.infrastructure.persistence.table_accessor import (
    TableAccessor,
    eq,
    search,
)


class DestinationRepository:
    _table: TableAccessor[Destination]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "destinations", Destination)

    async def get_destinations(self) -> list[Destination]:
        result = await self._table.select_many(action="fetching destinations")
        return result.unwrap_or([])

    async def get_destination(self, destination_id: str) -> Optional[Destination]:
        result = await self._table.select_one(
            eq("id", destination_id),
            action=f"fetching destination with id {destination_id}",
        )
        return result.unwrap_or(None)

    async def get_featured_destinations(self) -> list[Destination]:
        result = await self._table.select_many(
            eq("is_featured", True), action="fetching featured destinations"
        )
        return result.unwrap_or([])

    async def search_destinations(self, query: str) -> list[Destination]:
        result = await self._table.select_many(
            search(("name", "location", "description"), query),
            action="searching destinations",
        )
        return result.unwrap_or([])

    async def add_destination(self, destination: DestinationInput) -> Optional[Destination]:
        result = await self._table.insert_one(
            destination.to_row(), action="adding destination"
        )
        return result.unwrap_or(None)

    async def update_destination(
        self, destination_id: str, updates: DestinationUpdate
    ) -> Optional[Destination]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", destination_id),
            action=f"updating destination with id {destination_id}",
        )
        return result.unwrap_or(None)

    async def delete_destination(self, destination_id: str) -> bool:
        result = await self._table.delete(
            eq("id", destination_id),
            action=f"deleting destination with id {destination_id}",
        )
        return result.unwrap_or(False)
