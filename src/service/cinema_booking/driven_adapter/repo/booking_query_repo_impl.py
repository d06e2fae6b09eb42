"""
Booking Query Repository Implementation - read side of the reservation ledger
"""

from typing import AsyncContextManager, Callable, List

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.dto.booking_detail import BookingDetail
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.domain.entity.booking_entity import ACTIVE_BOOKING_STATUSES
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey
from src.service.cinema_booking.driven_adapter.model.booking_model import BookingModel
from src.service.cinema_booking.driven_adapter.model.cinema_model import CinemaModel
from src.service.cinema_booking.driven_adapter.model.payment_method_model import (
    PaymentMethodModel,
)
from src.service.cinema_booking.driven_adapter.model.seat_model import SeatModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def is_seat_available(self, *, seat_id: int, showtime: ShowtimeKey) -> bool:
        occupied = exists().where(
            BookingModel.cinema_id == showtime.cinema_id,
            BookingModel.seat_id == seat_id,
            BookingModel.booking_date == showtime.booking_date,
            BookingModel.booking_time == showtime.booking_time,
            BookingModel.booking_status.in_([s.value for s in ACTIVE_BOOKING_STATUSES]),
        )
        async with self.session_factory() as session:
            result = await session.execute(select(occupied))
            return not result.scalar()

    @Logger.io
    async def list_user_bookings_with_details(self, *, user_id: int) -> List[BookingDetail]:
        stmt = (
            select(
                BookingModel,
                CinemaModel.name,
                CinemaModel.location,
                SeatModel.seat_number,
                SeatModel.seat_type,
                PaymentMethodModel.name,
            )
            .join(CinemaModel, BookingModel.cinema_id == CinemaModel.id)
            .join(SeatModel, BookingModel.seat_id == SeatModel.id)
            .outerjoin(PaymentMethodModel, BookingModel.payment_method_id == PaymentMethodModel.id)
            .where(BookingModel.user_id == user_id)
            .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.all()

        return [
            BookingDetail(
                id=booking.id,
                user_id=booking.user_id,
                cinema_id=booking.cinema_id,
                seat_id=booking.seat_id,
                booking_date=booking.booking_date,
                booking_time=booking.booking_time,
                payment_status=booking.payment_status,
                booking_status=booking.booking_status,
                total_amount=booking.total_amount,
                cinema_name=cinema_name,
                cinema_location=cinema_location,
                seat_number=seat_number,
                seat_type=seat_type,
                payment_method_id=booking.payment_method_id,
                payment_method_name=payment_method_name,
                created_at=booking.created_at,
                updated_at=booking.updated_at,
            )
            for (
                booking,
                cinema_name,
                cinema_location,
                seat_number,
                seat_type,
                payment_method_name,
            ) in rows
        ]
