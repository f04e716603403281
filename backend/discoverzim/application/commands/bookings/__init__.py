from discoverzim.application.commands.bookings.book_accommodation import (
    BookAccommodationCommand,
    BookAccommodationHandler,
    BookingResult,
)

__all__ = ["BookAccommodationCommand", "BookAccommodationHandler", "BookingResult"]
