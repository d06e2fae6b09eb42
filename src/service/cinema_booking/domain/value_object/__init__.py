"""Cinema Booking Domain Value Objects"""

from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey

__all__ = ['ShowtimeKey']
