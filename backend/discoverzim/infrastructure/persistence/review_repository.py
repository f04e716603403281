"""Review Repository - the `reviews` table, newest first."""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.review import Review, ReviewCreate, ReviewUpdate
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq


class ReviewRepository:
    _table: TableAccessor[Review]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "reviews", Review)

    async def get_destination_reviews(self, destination_id: str) -> list[Review]:
        result = await self._table.select_many(
            eq("destination_id", destination_id),
            order_by="created_at",
            descending=True,
            action=f"fetching reviews for destination id {destination_id}",
        )
        return result.unwrap_or([])

    async def get_user_reviews(self, user_id: str) -> list[Review]:
        result = await self._table.select_many(
            eq("user_id", user_id),
            order_by="created_at",
            descending=True,
            action=f"fetching reviews for user id {user_id}",
        )
        return result.unwrap_or([])

    async def create_review(self, review: ReviewCreate) -> Optional[Review]:
        result = await self._table.insert_one(review.to_row(), action="creating review")
        return result.unwrap_or(None)

    async def update_review(
        self, review_id: str, updates: ReviewUpdate
    ) -> Optional[Review]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", review_id),
            action=f"updating review with id {review_id}",
        )
        return result.unwrap_or(None)

    async def delete_review(self, review_id: str) -> bool:
        result = await self._table.delete(
            eq("id", review_id), action=f"deleting review with id {review_id}"
        )
        return result.unwrap_or(False)
