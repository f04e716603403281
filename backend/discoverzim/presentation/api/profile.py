"""Profile API Router - The signed-in user's own profile."""

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from discoverzim.application.dto.profile import Profile, ProfileUpdate
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import ProfileRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=Profile)
@inject
async def get_profile(
    repository: FromDishka[ProfileRepository],
    session: SessionState = Depends(require_session),
):
    profile = await repository.get_profile(session.user.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.patch("", response_model=Profile)
@inject
async def update_profile(
    request: ProfileUpdate,
    repository: FromDishka[ProfileRepository],
    session: SessionState = Depends(require_session),
):
    profile = await repository.update_profile(session.user.id, request)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to update profile"
        )
    return profile
