"""
Accommodation Repository.

Reads the `accommodations` table. Listings are ordered by name; failures
come back as empty lists / None (the accessor has already logged them).
"""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.accommodation import Accommodation
from discoverzim.infrastructure.persistence.table_accessor import (
    Filter,
    TableAccessor,
    eq,
    ilike,
    search,
)


class AccommodationRepository:
    _table: TableAccessor[Accommodation]

    def __init__(self, client: AsyncClient, featured_limit: int = 6):
        self._table = TableAccessor(client, "accommodations", Accommodation)
        self._featured_limit = featured_limit

    async def get_accommodations(self) -> list[Accommodation]:
        result = await self._table.select_many(
            order_by="name", action="fetching accommodations"
        )
        return result.unwrap_or([])

    async def get_accommodation(self, accommodation_id: str) -> Optional[Accommodation]:
        result = await self._table.select_one(
            eq("id", accommodation_id),
            action=f"fetching accommodation with id {accommodation_id}",
        )
        return result.unwrap_or(None)

    async def get_featured_accommodations(self) -> list[Accommodation]:
        result = await self._table.select_many(
            eq("is_featured", True),
            order_by="name",
            limit=self._featured_limit,
            action="fetching featured accommodations",
        )
        return result.unwrap_or([])

    async def search_accommodations(
        self, query: str, location: Optional[str] = None
    ) -> list[Accommodation]:
        """
        Search by free text (name or description) and/or location substring.

        Either criterion may be empty; with both empty this is the full list.
        """
        filters: list[Filter] = []
        if query:
            filters.append(search(("name", "description"), query))
        if location:
            filters.append(ilike("location", location))
        result = await self._table.select_many(
            *filters, order_by="name", action="searching accommodations"
        )
        return result.unwrap_or([])
