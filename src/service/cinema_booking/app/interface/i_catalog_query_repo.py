from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema_booking.app.dto.seat_availability import SeatAvailability
from src.service.cinema_booking.domain.entity.cinema_entity import Cinema
from src.service.cinema_booking.domain.entity.seat_entity import Seat
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey


class ICatalogQueryRepo(ABC):
    """Read-only access to cinemas and seats"""

    @abstractmethod
    async def get_cinema_by_id(self, *, cinema_id: int) -> Optional[Cinema]:
        pass

    @abstractmethod
    async def get_seat_by_id(self, *, seat_id: int) -> Optional[Seat]:
        pass

    @abstractmethod
    async def list_cinemas(self, *, limit: int, offset: int) -> List[Cinema]:
        pass

    @abstractmethod
    async def count_cinemas(self) -> int:
        pass

    @abstractmethod
    async def list_seat_availability(self, *, showtime: ShowtimeKey) -> List[SeatAvailability]:
        """Every seat of the cinema ordered by row then seat number"""
        pass
