"""
Bookings API Router.

Guidelines:
- Users see and create their own bookings; admins may see and update any
- Booking a stay runs the BookAccommodation workflow and returns the
  tracker's final snapshot with the booking and payment it produced
- Payments belong to a booking: users upload proof, admins complete them
"""

from datetime import date
from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from discoverzim.application.commands.bookings import (
    BookAccommodationCommand,
    BookAccommodationHandler,
)
from discoverzim.application.dto.booking import Booking, BookingUpdate
from discoverzim.application.dto.payment import Payment
from discoverzim.domain.entities.session import SessionState
from discoverzim.domain.exceptions import (
    BookingFailedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.domain.services.process_tracker import ProcessTracker
from discoverzim.infrastructure.persistence import BookingRepository, PaymentRepository
from discoverzim.presentation.dependencies.auth import require_admin, require_session

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class BookAccommodationRequest(BaseModel):
    accommodation_id: str
    check_in: date
    check_out: date
    number_of_guests: int = Field(ge=1)
    room_type: str = "standard"
    contact_name: str
    contact_email: str
    contact_phone: str


class ProgressResponse(BaseModel):
    title: str
    description: Optional[str] = None
    steps: list[str]
    current_step: int
    progress: float


class BookAccommodationResponse(BaseModel):
    booking: Booking
    payment: Payment
    total_price: float
    number_of_nights: int
    email_sent: bool
    progress: ProgressResponse


class PaymentProofRequest(BaseModel):
    proof_url: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/bookings", tags=["bookings"])
payments_router = APIRouter(prefix="/payments", tags=["payments"])


async def _owned_booking(
    booking_id: str, repository: BookingRepository, session: SessionState
) -> Booking:
    booking = await repository.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    if booking.user_id != session.user.id and not session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Access denied to this booking"
        )
    return booking


@router.get("", response_model=list[Booking])
@inject
async def list_bookings(
    repository: FromDishka[BookingRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_bookings(session.user.id)


@router.get("/{booking_id}", response_model=Booking)
@inject
async def get_booking(
    booking_id: str,
    repository: FromDishka[BookingRepository],
    session: SessionState = Depends(require_session),
):
    return await _owned_booking(booking_id, repository, session)


@router.post(
    "/accommodation",
    response_model=BookAccommodationResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def book_accommodation(
    request: BookAccommodationRequest,
    handler: FromDishka[BookAccommodationHandler],
    tracker: FromDishka[ProcessTracker],
    session: SessionState = Depends(require_session),
):
    """Book a stay; the booking and its payment are both created pending."""
    try:
        result = await handler.execute(
            BookAccommodationCommand(user_id=session.user.id, **request.model_dump())
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        ) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except BookingFailedError as e:
        logger.error(f"Booking failed for user {session.user.id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e

    snapshot = tracker.snapshot()
    return BookAccommodationResponse(
        booking=result.booking,
        payment=result.payment,
        total_price=result.total_price,
        number_of_nights=result.number_of_nights,
        email_sent=result.email_sent,
        progress=ProgressResponse(
            title=snapshot.title,
            description=snapshot.description,
            steps=list(snapshot.steps),
            current_step=snapshot.current_step,
            progress=snapshot.progress,
        ),
    )


@router.patch("/{booking_id}", response_model=Booking)
@inject
async def update_booking(
    booking_id: str,
    request: BookingUpdate,
    repository: FromDishka[BookingRepository],
    session: SessionState = Depends(require_admin),
):
    booking = await repository.update_booking(booking_id, request)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@payments_router.get("/booking/{booking_id}", response_model=Payment)
@inject
async def get_booking_payment(
    booking_id: str,
    bookings: FromDishka[BookingRepository],
    payments: FromDishka[PaymentRepository],
    session: SessionState = Depends(require_session),
):
    await _owned_booking(booking_id, bookings, session)
    payment = await payments.get_payment_by_booking_id(booking_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment


@payments_router.post("/{payment_id}/proof", response_model=Payment)
@inject
async def upload_payment_proof(
    payment_id: str,
    request: PaymentProofRequest,
    bookings: FromDishka[BookingRepository],
    payments: FromDishka[PaymentRepository],
    session: SessionState = Depends(require_session),
):
    payment = await payments.get_payment(payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    await _owned_booking(payment.booking_id, bookings, session)
    updated = await payments.mark_payment_as_processing(payment_id, request.proof_url)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to record payment proof"
        )
    return updated


@payments_router.post("/{payment_id}/complete", response_model=Payment)
@inject
async def complete_payment(
    payment_id: str,
    payments: FromDishka[PaymentRepository],
    session: SessionState = Depends(require_admin),
):
    payment = await payments.mark_payment_as_completed(payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment
