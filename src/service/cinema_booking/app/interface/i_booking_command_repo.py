from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.cinema_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """Reservation ledger, write side"""

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a reserved booking.

        Raises:
            SeatUnavailableError: an active booking already holds the seat for
                the showtime (storage-level uniqueness)
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def mark_as_paid_atomically(self, *, booking: Booking) -> Optional[Booking]:
        """
        Set payment_status and booking_status to paid in one conditional write.

        Returns None when the booking was no longer pending (a concurrent
        payment already went through).
        """
        pass
