"""Payment records and write payloads."""

from datetime import datetime
from typing import Any, Optional

from discoverzim.application.dto.base import Record, WritePayload


class Payment(Record):
    id: str
    booking_id: Optional[str] = None
    amount: Optional[float] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    payment_gateway: Optional[str] = None
    payment_gateway_reference: Optional[str] = None
    payment_intent_id: Optional[str] = None
    payment_details: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaymentUpdate(WritePayload):
    amount: Optional[float] = None
    status: Optional[str] = None
    payment_method: Optional[str] = None
    payment_gateway: Optional[str] = None
    payment_gateway_reference: Optional[str] = None
    payment_intent_id: Optional[str] = None
    payment_details: Optional[dict[str, Any]] = None
    updated_at: Optional[datetime] = None


class PaymentCreate(PaymentUpdate):
    booking_id: str
    amount: float
    status: str
