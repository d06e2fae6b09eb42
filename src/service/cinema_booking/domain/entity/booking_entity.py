from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import StrEnum
from typing import Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.domain.booking_errors import AlreadyPaidError
from src.service.cinema_booking.domain.entity.seat_entity import Seat
from src.service.cinema_booking.domain.value_object.showtime_key import (
    ShowtimeKey,
    truncate_to_minute,
)


class BookingStatus(StrEnum):
    RESERVED = 'reserved'
    PAID = 'paid'
    CANCELLED = 'cancelled'  # no operation produces it yet


class PaymentStatus(StrEnum):
    PENDING = 'pending'
    PAID = 'paid'


# Statuses that occupy the seat for the showtime
ACTIVE_BOOKING_STATUSES = (BookingStatus.RESERVED, BookingStatus.PAID)


@attrs.define
class Booking:
    id: UUID
    user_id: int
    cinema_id: int
    seat_id: int
    booking_date: date
    booking_time: time = attrs.field(converter=truncate_to_minute)
    payment_method_id: Optional[int] = None
    total_amount: Decimal = Decimal('0.00')
    payment_status: PaymentStatus = PaymentStatus.PENDING
    booking_status: BookingStatus = BookingStatus.RESERVED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def showtime(self) -> ShowtimeKey:
        return ShowtimeKey(
            cinema_id=self.cinema_id,
            booking_date=self.booking_date,
            booking_time=self.booking_time,
        )

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        seat: Seat,
        showtime: ShowtimeKey,
        payment_method_id: int,
    ) -> 'Booking':
        """
        New reservation for a seat at a showtime.

        The amount is copied from the seat's price now; later price changes
        on the seat never touch existing bookings.
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid7(),
            user_id=user_id,
            cinema_id=showtime.cinema_id,
            seat_id=seat.id,
            booking_date=showtime.booking_date,
            booking_time=showtime.booking_time,
            payment_method_id=payment_method_id,
            total_amount=seat.price,
            payment_status=PaymentStatus.PENDING,
            booking_status=BookingStatus.RESERVED,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def validate_can_be_paid(self) -> None:
        """
        Raises:
            AlreadyPaidError: payment already went through for this booking
        """
        if self.is_paid:
            raise AlreadyPaidError('booking is already paid')

    @Logger.io
    def mark_as_paid(self) -> 'Booking':
        self.validate_can_be_paid()
        now = datetime.now(timezone.utc)
        return attrs.evolve(
            self,
            payment_status=PaymentStatus.PAID,
            booking_status=BookingStatus.PAID,
            updated_at=now,
        )
