"""
BookAccommodation Command - Book a stay and set up its manual payment.

Steps (each one advances the progress tracker):
1. Validating accommodation details
2. Creating booking record         (bookings: pending / pending)
3. Setting up payment              (payments: manual, pending; linked back)
4. Sending confirmation email      (failure is only logged)
5. Finalizing reservation

Total price = nights * price_per_night * room type multiplier.

A refused booking or payment write raises BookingFailedError; the tracker
is closed before the error leaves the handler.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

from discoverzim.application.common.interfaces import Command, CommandHandler
from discoverzim.application.dto.accommodation import Accommodation
from discoverzim.application.dto.booking import Booking, BookingCreate, BookingUpdate
from discoverzim.application.dto.payment import Payment, PaymentCreate
from discoverzim.domain.exceptions import (
    BookingFailedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.domain.ports.mail_gateway import MailGateway
from discoverzim.domain.services.process_tracker import ProcessTracker
from discoverzim.infrastructure.persistence.accommodation_repository import (
    AccommodationRepository,
)
from discoverzim.infrastructure.persistence.booking_repository import BookingRepository
from discoverzim.infrastructure.persistence.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)

BOOKING_TITLE = "Booking Your Stay"
BOOKING_STEPS = [
    "Validating accommodation details",
    "Creating booking record",
    "Setting up payment",
    "Sending confirmation email",
    "Finalizing reservation",
]


@dataclass
class BookingResult:
    booking: Booking
    payment: Payment
    total_price: float
    number_of_nights: int
    email_sent: bool


@dataclass(frozen=True)
class BookAccommodationCommand(Command[BookingResult]):
    user_id: str
    accommodation_id: str
    check_in: date
    check_out: date
    number_of_guests: int
    room_type: str
    contact_name: str
    contact_email: str
    contact_phone: str


class BookAccommodationHandler(CommandHandler[BookingResult]):
    def __init__(
        self,
        accommodations: AccommodationRepository,
        bookings: BookingRepository,
        payments: PaymentRepository,
        mail: MailGateway,
        tracker: ProcessTracker,
    ):
        self.accommodations = accommodations
        self.bookings = bookings
        self.payments = payments
        self.mail = mail
        self.tracker = tracker

    def _validate(self, command: BookAccommodationCommand) -> int:
        if not command.contact_name.strip():
            raise DomainValidationError("Contact name is required.")
        if not command.contact_email.strip():
            raise DomainValidationError("Contact email is required.")
        if not command.contact_phone.strip():
            raise DomainValidationError("Contact phone is required.")
        if command.number_of_guests < 1:
            raise DomainValidationError("At least one guest is required.")
        nights = (command.check_out - command.check_in).days
        if nights < 1:
            raise DomainValidationError("Check-out must be after check-in.")
        return nights

    async def execute(self, command: BookAccommodationCommand) -> BookingResult:
        nights = self._validate(command)

        accommodation = await self.accommodations.get_accommodation(command.accommodation_id)
        if accommodation is None:
            raise EntityNotFoundError("Accommodation not found.")
        if accommodation.price_per_night is None:
            raise DomainValidationError("Accommodation has no nightly price.")
        if accommodation.max_guests and command.number_of_guests > accommodation.max_guests:
            raise DomainValidationError(
                f"This accommodation sleeps at most {accommodation.max_guests} guests."
            )

        self.tracker.start(
            BOOKING_TITLE,
            BOOKING_STEPS,
            f"Booking {accommodation.name} for {command.number_of_guests} guest(s)",
        )
        try:
            result = await self._book(command, accommodation, nights)
        except BookingFailedError:
            self.tracker.close()
            raise
        self.tracker.complete()
        return result

    async def _book(
        self, command: BookAccommodationCommand, accommodation: Accommodation, nights: int
    ) -> BookingResult:
        self.tracker.advance(0)
        multiplier = accommodation.room_multiplier(command.room_type)
        total_price = nights * accommodation.price_per_night * multiplier

        self.tracker.advance(1)
        booking = await self.bookings.create_booking(
            BookingCreate(
                user_id=command.user_id,
                destination_id=command.accommodation_id,
                booking_date=datetime.now(timezone.utc),
                preferred_date=command.check_in.isoformat(),
                number_of_people=command.number_of_guests,
                total_price=total_price,
                contact_name=command.contact_name,
                contact_email=command.contact_email,
                contact_phone=command.contact_phone,
                status="pending",
                payment_status="pending",
                booking_details={
                    "type": "accommodation",
                    "accommodation_id": accommodation.id,
                    "accommodation_name": accommodation.name,
                    "accommodation_location": accommodation.location,
                    "check_in_date": command.check_in.isoformat(),
                    "check_out_date": command.check_out.isoformat(),
                    "number_of_nights": nights,
                    "room_type": command.room_type,
                    "base_price": accommodation.price_per_night,
                    "room_type_multiplier": multiplier,
                },
            )
        )
        if booking is None:
            raise BookingFailedError()

        self.tracker.advance(2)
        payment = await self.payments.create_payment(
            PaymentCreate(
                booking_id=booking.id,
                amount=total_price,
                status="pending",
                payment_gateway="manual",
                payment_details={
                    "accommodation_id": accommodation.id,
                    "room_type": command.room_type,
                    "number_of_guests": command.number_of_guests,
                    "number_of_nights": nights,
                },
            )
        )
        if payment is None:
            raise BookingFailedError("Failed to set up payment.")

        linked = await self.bookings.update_booking(
            booking.id, BookingUpdate(payment_id=payment.id)
        )
        booking = linked or booking.model_copy(update={"payment_id": payment.id})

        self.tracker.advance(3)
        email_sent = await self.mail.send_booking_confirmation(
            booking.model_dump(mode="json")
        )
        if not email_sent:
            logger.warning(f"Booking {booking.id} created but confirmation email failed")

        self.tracker.advance(4)
        logger.info(
            f"Booked accommodation {accommodation.id} for user {command.user_id}: "
            f"booking={booking.id} payment={payment.id} total={total_price}"
        )
        return BookingResult(
            booking=booking,
            payment=payment,
            total_price=total_price,
            number_of_nights=nights,
            email_sent=email_sent,
        )
