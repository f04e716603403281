"""
BookingFailedError - Raised when the data store refuses a booking step.
Maps to: HTTP 502 Bad Gateway
"""


class BookingFailedError(Exception):
    """Raised when a booking or payment record could not be written."""

    def __init__(self, message: str = "Failed to create booking."):
        super().__init__(message)
        self.message = message
