"""Booking Repository - the `bookings` table."""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.booking import Booking, BookingCreate, BookingUpdate
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq


class BookingRepository:
    _table: TableAccessor[Booking]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "bookings", Booking)

    async def get_user_bookings(self, user_id: str) -> list[Booking]:
        result = await self._table.select_many(
            eq("user_id", user_id),
            order_by="created_at",
            descending=True,
            action=f"fetching bookings for user id {user_id}",
        )
        return result.unwrap_or([])

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        result = await self._table.select_one(
            eq("id", booking_id), action=f"fetching booking with id {booking_id}"
        )
        return result.unwrap_or(None)

    async def create_booking(self, booking: BookingCreate) -> Optional[Booking]:
        result = await self._table.insert_one(booking.to_row(), action="creating booking")
        return result.unwrap_or(None)

    async def update_booking(
        self, booking_id: str, updates: BookingUpdate
    ) -> Optional[Booking]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", booking_id),
            action=f"updating booking with id {booking_id}",
        )
        return result.unwrap_or(None)
