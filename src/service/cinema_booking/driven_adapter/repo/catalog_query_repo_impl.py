from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.dto.seat_availability import SeatAvailability
from src.service.cinema_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.cinema_booking.domain.entity.booking_entity import ACTIVE_BOOKING_STATUSES
from src.service.cinema_booking.domain.entity.cinema_entity import Cinema
from src.service.cinema_booking.domain.entity.seat_entity import Seat
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey
from src.service.cinema_booking.driven_adapter.model.booking_model import BookingModel
from src.service.cinema_booking.driven_adapter.model.cinema_model import CinemaModel
from src.service.cinema_booking.driven_adapter.model.seat_model import SeatModel


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_cinema(model: CinemaModel) -> Cinema:
        return Cinema(
            id=model.id,
            name=model.name,
            location=model.location,
            description=model.description,
            total_seats=model.total_seats,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_seat(model: SeatModel) -> Seat:
        return Seat(
            id=model.id,
            cinema_id=model.cinema_id,
            seat_number=model.seat_number,
            row_number=model.row_number,
            seat_type=model.seat_type,
            price=model.price,
        )

    @Logger.io
    async def get_cinema_by_id(self, *, cinema_id: int) -> Optional[Cinema]:
        async with self.session_factory() as session:
            model = await session.get(CinemaModel, cinema_id)
            return self._to_cinema(model) if model else None

    @Logger.io
    async def get_seat_by_id(self, *, seat_id: int) -> Optional[Seat]:
        async with self.session_factory() as session:
            model = await session.get(SeatModel, seat_id)
            return self._to_seat(model) if model else None

    @Logger.io
    async def list_cinemas(self, *, limit: int, offset: int) -> List[Cinema]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CinemaModel).order_by(CinemaModel.id).limit(limit).offset(offset)
            )
            return [self._to_cinema(model) for model in result.scalars().all()]

    @Logger.io
    async def count_cinemas(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count(CinemaModel.id)))
            return result.scalar_one()

    @Logger.io
    async def list_seat_availability(self, *, showtime: ShowtimeKey) -> List[SeatAvailability]:
        active_booking = and_(
            BookingModel.seat_id == SeatModel.id,
            BookingModel.cinema_id == showtime.cinema_id,
            BookingModel.booking_date == showtime.booking_date,
            BookingModel.booking_time == showtime.booking_time,
            BookingModel.booking_status.in_([s.value for s in ACTIVE_BOOKING_STATUSES]),
        )
        stmt = (
            select(SeatModel, BookingModel.id)
            .outerjoin(BookingModel, active_booking)
            .where(SeatModel.cinema_id == showtime.cinema_id)
            .order_by(SeatModel.row_number, SeatModel.seat_number)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.all()

        return [
            SeatAvailability(
                seat_id=seat.id,
                cinema_id=seat.cinema_id,
                seat_number=seat.seat_number,
                row_number=seat.row_number,
                seat_type=seat.seat_type,
                price=seat.price,
                is_available=booking_id is None,
            )
            for seat, booking_id in rows
        ]
