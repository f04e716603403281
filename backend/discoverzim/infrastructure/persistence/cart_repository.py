"""
Cart Repository.

Guidelines:
- Cart rows live in `cart_items`; a row points at a destination OR an event
  (by convention, the store does not enforce exclusivity)
- Reads embed the referenced destination and event rows
- Lifecycle: add -> update quantity/date -> remove, or clear everything a
  user holds in one call
"""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.cart import CartItem, CartItemCreate, CartItemUpdate
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, by_id, eq

CART_COLUMNS = "*, destinations(*), events(*)"


class CartRepository:
    _table: TableAccessor[CartItem]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "cart_items", CartItem)

    async def get_user_cart(self, user_id: str) -> list[CartItem]:
        """
        Get a user's cart with the destination/event each item refers to.

        Args:
            user_id: Owner of the cart

        Returns:
            Cart items, empty when the cart is empty or the read failed
        """
        result = await self._table.select_many(
            eq("user_id", user_id),
            columns=CART_COLUMNS,
            action=f"fetching cart for user id {user_id}",
        )
        return result.unwrap_or([])

    async def add_to_cart(self, item: CartItemCreate) -> Optional[CartItem]:
        result = await self._table.insert_one(item.to_row(), action="adding to cart")
        return result.unwrap_or(None)

    async def update_cart_item(
        self, item_id: str, updates: CartItemUpdate, user_id: Optional[str] = None
    ) -> Optional[CartItem]:
        """Update one item; with ``user_id`` only an item that user owns matches."""
        result = await self._table.update_one(
            updates.to_row(),
            *by_id(item_id, user_id=user_id),
            action=f"updating cart item with id {item_id}",
        )
        return result.unwrap_or(None)

    async def remove_from_cart(self, item_id: str, user_id: Optional[str] = None) -> bool:
        result = await self._table.delete(
            *by_id(item_id, user_id=user_id),
            action=f"removing cart item with id {item_id}",
        )
        return result.unwrap_or(False)

    async def clear_cart(self, user_id: str) -> bool:
        result = await self._table.delete(
            eq("user_id", user_id), action=f"clearing cart for user id {user_id}"
        )
        return result.unwrap_or(False)
