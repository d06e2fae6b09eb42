"""
Test helpers for unit tests

Provides reusable test doubles for the booking use cases
"""

from datetime import datetime, timezone
from typing import Optional
from unittest.mock import AsyncMock

from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.domain.entity.cinema_entity import Cinema
from src.service.cinema_booking.domain.entity.seat_entity import Seat
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey
from test.constants import SEAT_PRICE, SHOW_DATE, SHOW_TIME, TEST_USER_ID


CINEMA_ID = 1
OTHER_CINEMA_ID = 2
SEAT_ID = 12
PAYMENT_METHOD_ID = 1


def make_cinema(cinema_id: int = CINEMA_ID) -> Cinema:
    return Cinema(id=cinema_id, name='Grand Cinema', location='Downtown', total_seats=120)


def make_seat(*, seat_id: int = SEAT_ID, cinema_id: int = CINEMA_ID, price=SEAT_PRICE) -> Seat:
    return Seat(
        id=seat_id,
        cinema_id=cinema_id,
        seat_number='04',
        row_number='B',
        seat_type='regular',
        price=price,
    )


def make_reserved_booking(*, user_id: int = TEST_USER_ID) -> Booking:
    booking = Booking.create(
        user_id=user_id,
        seat=make_seat(),
        showtime=ShowtimeKey(cinema_id=CINEMA_ID, booking_date=SHOW_DATE, booking_time=SHOW_TIME),
        payment_method_id=PAYMENT_METHOD_ID,
    )
    booking.created_at = datetime(2024, 4, 20, 10, 30, tzinfo=timezone.utc)
    return booking


class RepositoryMocks:
    """
    Mock repositories container for testing use cases

    Defaults describe the happy path: cinema and seat exist, the seat belongs
    to the cinema, the payment method is active and the seat is free.
    This is NOT a UoW - just a container for organizing mocks.
    """

    def __init__(
        self,
        *,
        cinema: Optional[Cinema] = None,
        seat: Optional[Seat] = None,
        booking: Optional[Booking] = None,
        payment_method_active: bool = True,
        seat_available: bool = True,
    ):
        self.cinema = cinema or make_cinema()
        self.seat = seat or make_seat()

        self.catalog_query_repo = AsyncMock()
        self.catalog_query_repo.get_cinema_by_id = AsyncMock(return_value=self.cinema)
        self.catalog_query_repo.get_seat_by_id = AsyncMock(return_value=self.seat)

        self.payment_method_query_repo = AsyncMock()
        self.payment_method_query_repo.is_payment_method_active = AsyncMock(
            return_value=payment_method_active
        )

        self.booking_query_repo = AsyncMock()
        self.booking_query_repo.is_seat_available = AsyncMock(return_value=seat_available)

        self.booking_command_repo = AsyncMock()
        # create() echoes the booking it was given, like the real ledger
        self.booking_command_repo.create = AsyncMock(side_effect=lambda *, booking: booking)
        self.booking_command_repo.get_by_id = AsyncMock(return_value=booking)
        self.booking_command_repo.mark_as_paid_atomically = AsyncMock(
            side_effect=lambda *, booking: booking
        )
