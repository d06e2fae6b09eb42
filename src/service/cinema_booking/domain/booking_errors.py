"""
Booking error taxonomy

Every failure of the reservation and payment flows maps to one of these
classes; the HTTP layer renders `error_code` and the message verbatim, so
messages never mention other users' bookings.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


class InvalidReferenceError(DomainError):
    error_code = 'invalid_reference'


class InvalidPaymentMethodError(DomainError):
    error_code = 'invalid_payment_method'


class SeatUnavailableError(ConflictError):
    error_code = 'seat_unavailable'


class UnauthorizedBookingError(ForbiddenError):
    error_code = 'unauthorized'


class AlreadyPaidError(ConflictError):
    error_code = 'already_paid'


__all__ = [
    'AlreadyPaidError',
    'InvalidPaymentMethodError',
    'InvalidReferenceError',
    'NotFoundError',
    'SeatUnavailableError',
    'UnauthorizedBookingError',
]
