"""
Reviews API Router.

Anyone may read a destination's reviews; writing requires a session, and a
review can only be changed or removed by its author.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from discoverzim.application.dto.review import Review, ReviewCreate, ReviewUpdate
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import ReviewRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/reviews", tags=["reviews"])


class CreateReviewRequest(BaseModel):
    destination_id: str
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    images: Optional[list[str]] = None


class DeleteResponse(BaseModel):
    success: bool


async def _own_review(
    review_id: str, repository: ReviewRepository, session: SessionState
) -> None:
    mine = await repository.get_user_reviews(session.user.id)
    if not any(review.id == review_id for review in mine):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")


@router.get("/destination/{destination_id}", response_model=list[Review])
@inject
async def destination_reviews(destination_id: str, repository: FromDishka[ReviewRepository]):
    return await repository.get_destination_reviews(destination_id)


@router.get("/mine", response_model=list[Review])
@inject
async def my_reviews(
    repository: FromDishka[ReviewRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_reviews(session.user.id)


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
@inject
async def create_review(
    request: CreateReviewRequest,
    repository: FromDishka[ReviewRepository],
    session: SessionState = Depends(require_session),
):
    review = await repository.create_review(
        ReviewCreate(user_id=session.user.id, **request.model_dump(exclude_none=True))
    )
    if review is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to create review"
        )
    return review


@router.patch("/{review_id}", response_model=Review)
@inject
async def update_review(
    review_id: str,
    request: ReviewUpdate,
    repository: FromDishka[ReviewRepository],
    session: SessionState = Depends(require_session),
):
    await _own_review(review_id, repository, session)
    review = await repository.update_review(review_id, request)
    if review is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return review


@router.delete("/{review_id}", response_model=DeleteResponse)
@inject
async def delete_review(
    review_id: str,
    repository: FromDishka[ReviewRepository],
    session: SessionState = Depends(require_session),
):
    await _own_review(review_id, repository, session)
    return DeleteResponse(success=await repository.delete_review(review_id))
