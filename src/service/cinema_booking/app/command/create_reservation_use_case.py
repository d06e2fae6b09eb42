from datetime import date, time
import time as time_module
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.cinema_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.cinema_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.cinema_booking.app.interface.i_payment_method_query_repo import (
    IPaymentMethodQueryRepo,
)
from src.service.cinema_booking.domain.booking_errors import (
    InvalidPaymentMethodError,
    InvalidReferenceError,
    SeatUnavailableError,
)
from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey


class CreateReservationUseCase:
    """
    Reserve one seat for one showtime.

    Flow (fail fast, nothing is written until every check passes):
    1. Resolve cinema and seat
    2. Seat must belong to the cinema
    3. Payment method must be active
    4. Availability check against the ledger
    5. Insert the reserved booking

    Step 4 is the cheap, friendly path. Two requests racing past it are
    settled by the ledger's unique index: the loser's insert fails and
    surfaces as SeatUnavailableError.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        catalog_query_repo: ICatalogQueryRepo,
        payment_method_query_repo: IPaymentMethodQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.catalog_query_repo = catalog_query_repo
        self.payment_method_query_repo = payment_method_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
        payment_method_query_repo: IPaymentMethodQueryRepo = Depends(
            Provide[Container.payment_method_query_repo]
        ),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            catalog_query_repo=catalog_query_repo,
            payment_method_query_repo=payment_method_query_repo,
        )

    @Logger.io
    async def create_reservation(
        self,
        *,
        user_id: int,
        cinema_id: int,
        seat_id: int,
        booking_date: date,
        booking_time: time,
        payment_method_id: int,
    ) -> Booking:
        """
        Raises:
            NotFoundError: cinema or seat does not exist
            InvalidReferenceError: seat belongs to another cinema
            InvalidPaymentMethodError: payment method unknown or inactive
            SeatUnavailableError: seat already reserved or paid for the showtime
        """
        showtime = ShowtimeKey(
            cinema_id=cinema_id, booking_date=booking_date, booking_time=booking_time
        )
        start = time_module.perf_counter()

        with self.tracer.start_as_current_span(
            'use_case.create_reservation',
            attributes={
                'user.id': user_id,
                'cinema.id': cinema_id,
                'seat.id': seat_id,
                'showtime': f'{showtime.booking_date.isoformat()} {showtime.booking_time:%H:%M}',
            },
        ):
            try:
                booking = await self._reserve(
                    user_id=user_id,
                    seat_id=seat_id,
                    showtime=showtime,
                    payment_method_id=payment_method_id,
                )
            except CustomBaseError as e:
                metrics.record_reservation(
                    result=e.error_code, duration=time_module.perf_counter() - start
                )
                raise

        metrics.record_reservation(result='success', duration=time_module.perf_counter() - start)
        Logger.base.info(
            f'📝 [CREATE-RESERVATION] Booking {booking.id} reserved seat {seat_id} '
            f'at cinema {cinema_id} for user {user_id}'
        )
        return booking

    async def _reserve(
        self,
        *,
        user_id: int,
        seat_id: int,
        showtime: ShowtimeKey,
        payment_method_id: int,
    ) -> Booking:
        cinema = await self.catalog_query_repo.get_cinema_by_id(cinema_id=showtime.cinema_id)
        if not cinema:
            raise NotFoundError('cinema not found')

        seat = await self.catalog_query_repo.get_seat_by_id(seat_id=seat_id)
        if not seat:
            raise NotFoundError('seat not found')

        if not seat.belongs_to(cinema.id):
            raise InvalidReferenceError('seat does not belong to the specified cinema')

        if not await self.payment_method_query_repo.is_payment_method_active(
            payment_method_id=payment_method_id
        ):
            raise InvalidPaymentMethodError('invalid payment method')

        if not await self.booking_query_repo.is_seat_available(seat_id=seat.id, showtime=showtime):
            raise SeatUnavailableError('seat is already booked for the specified time')

        booking = Booking.create(
            user_id=user_id,
            seat=seat,
            showtime=showtime,
            payment_method_id=payment_method_id,
        )
        return await self.booking_command_repo.create(booking=booking)
