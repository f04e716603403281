"""
Payment Repository.

Manual payments move pending -> processing (proof uploaded) -> completed.
Each transition rewrites `payment_details` with a timestamped marker.
"""

from datetime import datetime, timezone
from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.payment import Payment, PaymentCreate, PaymentUpdate
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class PaymentRepository:
    _table: TableAccessor[Payment]

    def __init__(self, client: AsyncClient):
        self._table = TableAccessor(client, "payments", Payment)

    async def get_payment(self, payment_id: str) -> Optional[Payment]:
        result = await self._table.select_one(
            eq("id", payment_id), action=f"fetching payment with id {payment_id}"
        )
        return result.unwrap_or(None)

    async def get_payment_by_booking_id(self, booking_id: str) -> Optional[Payment]:
        result = await self._table.select_one(
            eq("booking_id", booking_id),
            maybe=True,
            action=f"fetching payment for booking id {booking_id}",
        )
        return result.unwrap_or(None)

    async def create_payment(self, payment: PaymentCreate) -> Optional[Payment]:
        result = await self._table.insert_one(payment.to_row(), action="creating payment")
        return result.unwrap_or(None)

    async def update_payment(
        self, payment_id: str, updates: PaymentUpdate
    ) -> Optional[Payment]:
        result = await self._table.update_one(
            updates.to_row(),
            eq("id", payment_id),
            action=f"updating payment with id {payment_id}",
        )
        return result.unwrap_or(None)

    async def mark_payment_as_processing(
        self, payment_id: str, proof_url: str
    ) -> Optional[Payment]:
        """Record an uploaded proof of payment and await manual review."""
        result = await self._table.update_one(
            {
                "status": "processing",
                "payment_details": {
                    "proof_uploaded": True,
                    "proof_uploaded_at": _now(),
                    "proof_url": proof_url,
                },
            },
            eq("id", payment_id),
            action=f"marking payment with id {payment_id} as processing",
        )
        return result.unwrap_or(None)

    async def mark_payment_as_completed(self, payment_id: str) -> Optional[Payment]:
        now = _now()
        result = await self._table.update_one(
            {
                "status": "completed",
                "updated_at": now,
                "payment_details": {"completed_at": now},
            },
            eq("id", payment_id),
            action=f"marking payment with id {payment_id} as completed",
        )
        return result.unwrap_or(None)
