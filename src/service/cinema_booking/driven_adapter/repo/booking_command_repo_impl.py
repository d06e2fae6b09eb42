"""
Booking Command Repository Implementation

Write side of the reservation ledger. Both writes are single statements:
- create: INSERT guarded by the partial unique index uq_booking_active_seat_showtime
- mark_as_paid_atomically: conditional UPDATE ... WHERE payment_status = 'pending'
"""

from typing import AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema_booking.domain.booking_errors import SeatUnavailableError
from src.service.cinema_booking.domain.entity.booking_entity import (
    Booking,
    BookingStatus,
    PaymentStatus,
)
from src.service.cinema_booking.driven_adapter.model.booking_model import BookingModel


ACTIVE_SEAT_INDEX = 'uq_booking_active_seat_showtime'

# SQLite reports the violated columns instead of the index name
_SQLITE_ACTIVE_SEAT_VIOLATION = 'UNIQUE constraint failed: booking.cinema_id, booking.seat_id'


def is_active_seat_conflict(error: IntegrityError) -> bool:
    message = str(error.orig)
    return ACTIVE_SEAT_INDEX in message or _SQLITE_ACTIVE_SEAT_VIOLATION in message


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(model: BookingModel) -> Booking:
        return Booking(
            id=model.id,
            user_id=model.user_id,
            cinema_id=model.cinema_id,
            seat_id=model.seat_id,
            booking_date=model.booking_date,
            booking_time=model.booking_time,
            payment_method_id=model.payment_method_id,
            total_amount=model.total_amount,
            payment_status=PaymentStatus(model.payment_status),
            booking_status=BookingStatus(model.booking_status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            session.add(
                BookingModel(
                    id=booking.id,
                    user_id=booking.user_id,
                    cinema_id=booking.cinema_id,
                    seat_id=booking.seat_id,
                    booking_date=booking.booking_date,
                    booking_time=booking.booking_time,
                    payment_method_id=booking.payment_method_id,
                    payment_status=booking.payment_status.value,
                    total_amount=booking.total_amount,
                    booking_status=booking.booking_status.value,
                    created_at=booking.created_at,
                    updated_at=booking.updated_at,
                )
            )
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if not is_active_seat_conflict(e):
                    raise
                Logger.base.warning(
                    f'🪑 [LEDGER] Lost seat race: seat={booking.seat_id} '
                    f'showtime={booking.booking_date} {booking.booking_time}'
                )
                raise SeatUnavailableError('seat is already booked for the specified time') from e

        return booking

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(select(BookingModel).where(BookingModel.id == booking_id))
            model = result.scalar_one_or_none()
            if not model:
                return None
            return self._to_entity(model)

    @Logger.io
    async def mark_as_paid_atomically(self, *, booking: Booking) -> Optional[Booking]:
        stmt = (
            update(BookingModel)
            .where(
                BookingModel.id == booking.id,
                BookingModel.payment_status == PaymentStatus.PENDING.value,
            )
            .values(
                payment_status=PaymentStatus.PAID.value,
                booking_status=BookingStatus.PAID.value,
                updated_at=booking.updated_at,
            )
            .returning(BookingModel)
            .execution_options(synchronize_session=False)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            paid_booking = self._to_entity(model) if model else None
            await session.commit()

        return paid_booking
