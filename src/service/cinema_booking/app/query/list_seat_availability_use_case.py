from datetime import date, time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.dto.seat_availability import SeatAvailability
from src.service.cinema_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.cinema_booking.domain.value_object.showtime_key import ShowtimeKey


class ListSeatAvailabilityUseCase:
    """Seat map of a cinema for one showtime, read straight from the ledger"""

    def __init__(self, catalog_query_repo: ICatalogQueryRepo):
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def list_seats(
        self, *, cinema_id: int, booking_date: date, booking_time: time
    ) -> List[SeatAvailability]:
        if not await self.catalog_query_repo.get_cinema_by_id(cinema_id=cinema_id):
            raise NotFoundError('cinema not found')

        showtime = ShowtimeKey(
            cinema_id=cinema_id, booking_date=booking_date, booking_time=booking_time
        )
        return await self.catalog_query_repo.list_seat_availability(showtime=showtime)
