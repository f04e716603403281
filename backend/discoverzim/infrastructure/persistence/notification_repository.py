"""Notification Repository - the `notifications` table, newest first."""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.notification import Notification
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, by_id, eq


class NotificationRepository:
    _table: TableAccessor[Notification]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "notifications", Notification)

    async def get_user_notifications(self, user_id: str) -> list[Notification]:
        result = await self._table.select_many(
            eq("user_id", user_id),
            order_by="created_at",
            descending=True,
            action=f"fetching notifications for user id {user_id}",
        )
        return result.unwrap_or([])

    async def get_unread_notifications(self, user_id: str) -> list[Notification]:
        result = await self._table.select_many(
            eq("user_id", user_id),
            eq("is_read", False),
            order_by="created_at",
            descending=True,
            action=f"fetching unread notifications for user id {user_id}",
        )
        return result.unwrap_or([])

    async def mark_notification_as_read(
        self, notification_id: str, user_id: Optional[str] = None
    ) -> Optional[Notification]:
        result = await self._table.update_one(
            {"is_read": True},
            *by_id(notification_id, user_id=user_id),
            action=f"marking notification with id {notification_id} as read",
        )
        return result.unwrap_or(None)

    async def mark_all_notifications_as_read(self, user_id: str) -> bool:
        result = await self._table.update_many(
            {"is_read": True},
            eq("user_id", user_id),
            eq("is_read", False),
            action=f"marking all notifications for user id {user_id} as read",
        )
        return result.ok
