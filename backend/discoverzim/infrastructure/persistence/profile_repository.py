"""
Profile Repository.

Profiles (`profiles`) carry the user's role. Only two roles exist:
USER (default) and ADMIN.
"""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.profile import Profile, ProfileUpdate, UserRole
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq

ADMIN_ROLE = "ADMIN"
DEFAULT_ROLE = "USER"


class ProfileRepository:
    _table: TableAccessor[Profile]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "profiles", Profile)

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        result = await self._table.select_one(
            eq("id", user_id), action=f"fetching profile for user id {user_id}"
        )
        return result.unwrap_or(None)

    async def update_profile(
        self, user_id: str, updates: ProfileUpdate
    ) -> Optional[Profile]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", user_id),
            action=f"updating profile for user id {user_id}",
        )
        return result.unwrap_or(None)

    async def get_user_role(self, user_id: str) -> Optional[str]:
        """The stored role, or None when the profile can't be read."""
        result = await self._table.select_one(
            eq("id", user_id),
            columns="id, role",
            action=f"fetching role for user id {user_id}",
        )
        profile = result.unwrap_or(None)
        if profile is None:
            return None
        return profile.role or DEFAULT_ROLE

    async def is_admin(self, user_id: str) -> bool:
        return await self.get_user_role(user_id) == ADMIN_ROLE

    async def update_user_role(self, user_id: str, role: UserRole) -> bool:
        result = await self._table.update_many(
            {"role": role},
            eq("id", user_id),
            action=f"updating role for user id {user_id}",
        )
        return result.ok

    async def get_all_users(self) -> list[Profile]:
        result = await self._table.select_many(
            order_by="created_at", descending=True, action="fetching users"
        )
        return result.unwrap_or([])
