"""Wishlist Repository - saved destinations per user."""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.wishlist import WishlistEntry
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq

WISHLIST_COLUMNS = "*, destinations(*)"


class WishlistRepository:
    _table: TableAccessor[WishlistEntry]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "wishlist", WishlistEntry)

    async def get_user_wishlist(self, user_id: str) -> list[WishlistEntry]:
        result = await self._table.select_many(
            eq("user_id", user_id),
            columns=WISHLIST_COLUMNS,
            order_by="created_at",
            descending=True,
            action=f"fetching wishlist for user id {user_id}",
        )
        return result.unwrap_or([])

    async def add_to_wishlist(
        self, user_id: str, destination_id: str
    ) -> Optional[WishlistEntry]:
        result = await self._table.insert_one(
            {"user_id": user_id, "destination_id": destination_id},
            action="adding to wishlist",
        )
        return result.unwrap_or(None)

    async def remove_from_wishlist(self, user_id: str, destination_id: str) -> bool:
        result = await self._table.delete(
            eq("user_id", user_id),
            eq("destination_id", destination_id),
            action=f"removing destination id {destination_id} from wishlist",
        )
        return result.unwrap_or(False)

    async def is_in_wishlist(self, user_id: str, destination_id: str) -> bool:
        result = await self._table.select_one(
            eq("user_id", user_id),
            eq("destination_id", destination_id),
            columns="id, user_id, destination_id",
            maybe=True,
            action="checking wishlist",
        )
        return result.unwrap_or(None) is not None
