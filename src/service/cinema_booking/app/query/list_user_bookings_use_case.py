from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.dto.booking_detail import BookingDetail
from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListUserBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_user_bookings(self, user_id: int) -> List[BookingDetail]:
        """Most recent booking first"""
        return await self.booking_query_repo.list_user_bookings_with_details(user_id=user_id)
