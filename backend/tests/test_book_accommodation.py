"""
Tests for the BookAccommodation workflow.

Run with: pytest tests/test_book_accommodation.py -v
"""

from datetime import date

import pytest
from conftest import USER_ID, run
from discoverzim.application.commands.bookings import (
    BookAccommodationCommand,
    BookAccommodationHandler,
)
from discoverzim.application.commands.bookings.book_accommodation import (
    BOOKING_STEPS,
    BOOKING_TITLE,
)
from discoverzim.domain.exceptions import (
    BookingFailedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.domain.services.process_tracker import ProcessTracker
from discoverzim.infrastructure.functions import EdgeFunctionGateway
from discoverzim.infrastructure.persistence import (
    AccommodationRepository,
    BookingRepository,
    PaymentRepository,
)


class StepRecorder:
    """Tracker that remembers each step it was moved to."""

    def __init__(self):
        self.tracker = ProcessTracker(scheduler=lambda delay, callback: None)
        self.visited = []
        advance = self.tracker.advance

        def record(step_index, progress=None):
            self.visited.append(step_index)
            advance(step_index, progress)

        self.tracker.advance = record


@pytest.fixture()
def recorder():
    return StepRecorder()


@pytest.fixture()
def handler(store, recorder):
    return BookAccommodationHandler(
        accommodations=AccommodationRepository(store),
        bookings=BookingRepository(store),
        payments=PaymentRepository(store),
        mail=EdgeFunctionGateway(store),
        tracker=recorder.tracker,
    )


def _command(**overrides):
    values = dict(
        user_id=USER_ID,
        accommodation_id="acc-lodge",
        check_in=date(2026, 12, 20),
        check_out=date(2026, 12, 22),
        number_of_guests=2,
        room_type="deluxe",
        contact_name="Tendai Moyo",
        contact_email="tendai@example.com",
        contact_phone="+263 77 000 0000",
    )
    values.update(overrides)
    return BookAccommodationCommand(**values)


class TestSuccessfulBooking:
    def test_creates_booking_and_payment(self, handler, store):
        result = run(handler.execute(_command()))

        assert result.number_of_nights == 2
        assert result.total_price == 300  # 2 nights * 100 * 1.5 (deluxe)

        booking = store.rows("bookings")[0]
        assert booking["status"] == "pending"
        assert booking["payment_status"] == "pending"
        assert booking["destination_id"] == "acc-lodge"
        assert booking["preferred_date"] == "2026-12-20"
        assert booking["booking_details"]["type"] == "accommodation"
        assert booking["booking_details"]["number_of_nights"] == 2
        assert booking["booking_details"]["room_type_multiplier"] == 1.5

        payment = store.rows("payments")[0]
        assert payment["booking_id"] == booking["id"]
        assert payment["amount"] == 300
        assert payment["payment_gateway"] == "manual"
        assert payment["status"] == "pending"
        assert booking["payment_id"] == payment["id"]
        assert result.booking.payment_id == payment["id"]

    def test_requests_confirmation_email(self, handler, store):
        result = run(handler.execute(_command()))

        name, body = store.functions.calls[0]
        assert name == "send-email"
        assert body["templateType"] == "bookingConfirmation"
        assert body["bookingData"]["id"] == result.booking.id
        assert result.email_sent is True

    def test_drives_tracker_through_every_step(self, handler, recorder):
        run(handler.execute(_command()))

        snapshot = recorder.tracker.snapshot()
        assert recorder.visited == [0, 1, 2, 3, 4]
        assert snapshot.title == BOOKING_TITLE
        assert snapshot.steps == tuple(BOOKING_STEPS)
        assert snapshot.description == "Booking Safari Lodge for 2 guest(s)"
        assert snapshot.progress == 100
        assert snapshot.current_step == len(BOOKING_STEPS) - 1

    def test_email_failure_does_not_fail_booking(self, handler, store):
        store.functions.errors["send-email"] = RuntimeError("mail relay down")

        result = run(handler.execute(_command()))

        assert result.email_sent is False
        assert len(store.rows("bookings")) == 1


class TestRejectedBooking:
    def test_checkout_before_checkin(self, handler, store):
        with pytest.raises(DomainValidationError):
            run(handler.execute(_command(check_out=date(2026, 12, 20))))

        assert store.rows("bookings") == []

    def test_missing_contact(self, handler):
        with pytest.raises(DomainValidationError):
            run(handler.execute(_command(contact_email="  ")))

    def test_too_many_guests(self, handler):
        with pytest.raises(DomainValidationError):
            run(handler.execute(_command(number_of_guests=9)))

    def test_unknown_accommodation(self, handler):
        with pytest.raises(EntityNotFoundError):
            run(handler.execute(_command(accommodation_id="missing")))

    def test_booking_write_failure_closes_tracker(self, handler, store, recorder):
        store.fail_table("bookings")

        with pytest.raises(BookingFailedError):
            run(handler.execute(_command()))

        assert recorder.tracker.is_open is False
        assert store.rows("payments") == []

    def test_payment_write_failure(self, handler, store, recorder):
        store.fail_table("payments")

        with pytest.raises(BookingFailedError):
            run(handler.execute(_command()))

        assert recorder.tracker.is_open is False
        assert store.functions.calls == []
