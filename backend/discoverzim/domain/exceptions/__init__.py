"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from discoverzim.domain.exceptions.entity_not_found import EntityNotFoundError
from discoverzim.domain.exceptions.access_denied import AccessDeniedError
from discoverzim.domain.exceptions.validation_error import DomainValidationError
from discoverzim.domain.exceptions.booking_failed import BookingFailedError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "BookingFailedError",
]
