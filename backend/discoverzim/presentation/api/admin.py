"""
Admin API Router - User and role management.

Every endpoint requires an administrator session; other signed-in users are
redirected to the landing page with a denial notice.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.profile import Profile, UserRole
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import ProfileRepository
from discoverzim.presentation.dependencies.auth import require_admin

logger = getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


class UpdateRoleRequest(BaseModel):
    role: UserRole


class UpdateRoleResponse(BaseModel):
    user_id: str
    role: UserRole


@router.get("/users", response_model=list[Profile])
@inject
async def list_users(
    repository: FromDishka[ProfileRepository],
    session: SessionState = Depends(require_admin),
):
    return await repository.get_all_users()


@router.put("/users/{user_id}/role", response_model=UpdateRoleResponse)
@inject
async def update_user_role(
    user_id: str,
    request: UpdateRoleRequest,
    repository: FromDishka[ProfileRepository],
    session: SessionState = Depends(require_admin),
):
    if not await repository.update_user_role(user_id, request.role):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to update role"
        )
    logger.info(f"User {session.user.id} set role of {user_id} to {request.role}")
    return UpdateRoleResponse(user_id=user_id, role=request.role)
