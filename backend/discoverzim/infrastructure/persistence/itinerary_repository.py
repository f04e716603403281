"""
Itinerary Repository.

Guidelines:
- An itinerary (`itineraries`) owns ordered stops (`itinerary_destinations`)
- Reads embed the stops; records sort them by `order`
- New stops go to the end: order = current max + 1, or 0 for the first
- Making an itinerary public for the first time assigns an 8-character
  share code; public itineraries can then be read by that code
"""

import logging
import secrets
import string
from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.itinerary import (
    Itinerary,
    ItineraryCreate,
    ItineraryDestination,
    ItineraryDestinationCreate,
    ItineraryDestinationUpdate,
    ItineraryUpdate,
)
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, by_id, eq

logger = logging.getLogger(__name__)

ITINERARY_COLUMNS = "*, itinerary_destinations(*)"
SHARE_CODE_LENGTH = 8
_SHARE_CODE_ALPHABET = string.ascii_lowercase + string.digits


def generate_share_code(length: int = SHARE_CODE_LENGTH) -> str:
    return "".join(secrets.choice(_SHARE_CODE_ALPHABET) for _ in range(length))


class ItineraryRepository:
    def __init__(self, client: AsyncClient):
        self._itineraries = TableAccessor(client, "itineraries", Itinerary)
        self._stops = TableAccessor(client, "itinerary_destinations", ItineraryDestination)

    async def create_itinerary(self, itinerary: ItineraryCreate) -> Optional[Itinerary]:
        row = itinerary.to_row()
        if row.get("is_public"):
            row["share_code"] = generate_share_code()
        result = await self._itineraries.insert_one(row, action="creating itinerary")
        return result.unwrap_or(None)

    async def get_user_itineraries(self, user_id: str) -> list[Itinerary]:
        result = await self._itineraries.select_many(
            eq("user_id", user_id),
            columns=ITINERARY_COLUMNS,
            order_by="created_at",
            descending=True,
            action=f"fetching itineraries for user id {user_id}",
        )
        return result.unwrap_or([])

    async def get_itinerary(self, itinerary_id: str) -> Optional[Itinerary]:
        result = await self._itineraries.select_one(
            eq("id", itinerary_id),
            columns=ITINERARY_COLUMNS,
            action=f"fetching itinerary with id {itinerary_id}",
        )
        return result.unwrap_or(None)

    async def get_itinerary_by_share_code(self, share_code: str) -> Optional[Itinerary]:
        """Only public itineraries are reachable by code."""
        result = await self._itineraries.select_one(
            eq("share_code", share_code),
            eq("is_public", True),
            columns=ITINERARY_COLUMNS,
            maybe=True,
            action=f"fetching itinerary with share code {share_code}",
        )
        return result.unwrap_or(None)

    async def update_itinerary(
        self, itinerary_id: str, updates: ItineraryUpdate
    ) -> Optional[Itinerary]:
        row = updates.to_row()
        if row.get("is_public"):
            current = await self.get_itinerary(itinerary_id)
            if current is not None and not current.share_code:
                row["share_code"] = generate_share_code()
                logger.info(f"Assigned share code to itinerary {itinerary_id}")
        result = await self._itineraries.update_one(
            row,
            eq("id", itinerary_id),
            action=f"updating itinerary with id {itinerary_id}",
        )
        return result.unwrap_or(None)

    async def delete_itinerary(self, itinerary_id: str) -> bool:
        result = await self._itineraries.delete(
            eq("id", itinerary_id),
            action=f"deleting itinerary with id {itinerary_id}",
        )
        return result.unwrap_or(False)

    async def add_destination_to_itinerary(
        self, itinerary_id: str, stop: ItineraryDestinationCreate
    ) -> Optional[ItineraryDestination]:
        row = stop.to_row()
        if "order" not in row:
            orders = await self._stops.select_values(
                "order",
                eq("itinerary_id", itinerary_id),
                action=f"fetching stops for itinerary id {itinerary_id}",
            )
            if not orders.ok:
                return None
            taken = [value for value in orders.data if value is not None]
            row["order"] = max(taken) + 1 if taken else 0
        row["itinerary_id"] = itinerary_id
        result = await self._stops.insert_one(
            row, action=f"adding destination to itinerary id {itinerary_id}"
        )
        return result.unwrap_or(None)

    async def update_itinerary_destination(
        self,
        stop_id: str,
        updates: ItineraryDestinationUpdate,
        itinerary_id: Optional[str] = None,
    ) -> Optional[ItineraryDestination]:
        result = await self._stops.update_one(
            updates.to_row(),
            *by_id(stop_id, itinerary_id=itinerary_id),
            action=f"updating itinerary destination with id {stop_id}",
        )
        return result.unwrap_or(None)

    async def remove_destination_from_itinerary(
        self, stop_id: str, itinerary_id: Optional[str] = None
    ) -> bool:
        """Delete a stop; with ``itinerary_id`` only a stop of that itinerary matches."""
        result = await self._stops.delete(
            *by_id(stop_id, itinerary_id=itinerary_id),
            action=f"removing itinerary destination with id {stop_id}",
        )
        return result.unwrap_or(False)
