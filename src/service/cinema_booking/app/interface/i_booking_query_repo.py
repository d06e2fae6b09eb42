from abc import ABC, abstractmethod
from typing import List

from src.service.cinema_booking.app.dto.booking_detail import BookingDetail
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey


class IBookingQueryRepo(ABC):
    """Reservation ledger, read side"""

    @abstractmethod
    async def is_seat_available(self, *, seat_id: int, showtime: ShowtimeKey) -> bool:
        """True iff no reserved or paid booking exists for the seat at the showtime"""
        pass

    @abstractmethod
    async def list_user_bookings_with_details(self, *, user_id: int) -> List[BookingDetail]:
        pass
