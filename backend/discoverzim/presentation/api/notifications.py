"""Notifications API Router - The signed-in user's notifications, newest first."""

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.notification import Notification
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import NotificationRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/notifications", tags=["notifications"])


class MarkAllReadResponse(BaseModel):
    success: bool


@router.get("", response_model=list[Notification])
@inject
async def list_notifications(
    repository: FromDishka[NotificationRepository],
    unread: bool = False,
    session: SessionState = Depends(require_session),
):
    if unread:
        return await repository.get_unread_notifications(session.user.id)
    return await repository.get_user_notifications(session.user.id)


@router.post("/{notification_id}/read", response_model=Notification)
@inject
async def mark_as_read(
    notification_id: str,
    repository: FromDishka[NotificationRepository],
    session: SessionState = Depends(require_session),
):
    notification = await repository.mark_notification_as_read(
        notification_id, user_id=session.user.id
    )
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        )
    return notification


@router.post("/read-all", response_model=MarkAllReadResponse)
@inject
async def mark_all_as_read(
    repository: FromDishka[NotificationRepository],
    session: SessionState = Depends(require_session),
):
    return MarkAllReadResponse(
        success=await repository.mark_all_notifications_as_read(session.user.id)
    )
