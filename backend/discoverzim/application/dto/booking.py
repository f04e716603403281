"""Booking records and write payloads."""

from datetime import datetime
from typing import Any, Literal, Optional

from discoverzim.application.dto.base import Record, WritePayload

BookingStatus = Literal["pending", "confirmed", "cancelled", "completed"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded"]


class Booking(Record):
    id: str
    user_id: Optional[str] = None
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
    booking_date: Optional[datetime] = None
    number_of_people: Optional[int] = None
    total_price: Optional[float] = None
    preferred_date: Optional[str] = None
    booking_details: Optional[dict[str, Any]] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    payment_id: Optional[str] = None
    payment_proof_url: Optional[str] = None
    payment_proof_uploaded_at: Optional[datetime] = None
    confirmation_date: Optional[datetime] = None
    cancellation_date: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    completion_date: Optional[datetime] = None
    selected_ticket_type: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingUpdate(WritePayload):
    booking_date: Optional[datetime] = None
    number_of_people: Optional[int] = None
    total_price: Optional[float] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    user_id: Optional[str] = None
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
    preferred_date: Optional[str] = None
    booking_details: Optional[dict[str, Any]] = None
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    payment_id: Optional[str] = None
    payment_proof_url: Optional[str] = None
    payment_proof_uploaded_at: Optional[datetime] = None
    confirmation_date: Optional[datetime] = None
    cancellation_date: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    completion_date: Optional[datetime] = None
    selected_ticket_type: Optional[dict[str, Any]] = None


class BookingCreate(BookingUpdate):
    booking_date: datetime
    number_of_people: int
    total_price: float
    contact_name: str
    contact_email: str
    contact_phone: str
