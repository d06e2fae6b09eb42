from datetime import date, time
from typing import List

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.query.get_cinema_use_case import GetCinemaUseCase
from src.service.cinema_booking.app.query.list_cinemas_use_case import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListCinemasUseCase,
)
from src.service.cinema_booking.app.query.list_seat_availability_use_case import (
    ListSeatAvailabilityUseCase,
)
from src.service.cinema_booking.driving_adapter.http_controller.schema.cinema_schema import (
    CinemaListResponse,
    CinemaResponse,
    PaginationMeta,
    SeatAvailabilityResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_cinemas(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    use_case: ListCinemasUseCase = Depends(ListCinemasUseCase.depends),
) -> CinemaListResponse:
    result = await use_case.list_cinemas(page=page, page_size=page_size)
    return CinemaListResponse(
        data=[
            CinemaResponse.model_validate(cinema, from_attributes=True)
            for cinema in result.cinemas
        ],
        pagination=PaginationMeta(
            current_page=result.page,
            page_size=result.page_size,
            total_items=result.total_items,
            total_pages=result.total_pages,
        ),
    )


@router.get('/{cinema_id}')
@Logger.io
async def get_cinema(
    cinema_id: int,
    use_case: GetCinemaUseCase = Depends(GetCinemaUseCase.depends),
) -> CinemaResponse:
    cinema = await use_case.get_cinema(cinema_id)
    return CinemaResponse.model_validate(cinema, from_attributes=True)


@router.get('/{cinema_id}/seats', response_model=List[SeatAvailabilityResponse])
@Logger.io
async def list_cinema_seats(
    cinema_id: int,
    booking_date: date = Query(alias='date'),
    booking_time: str = Query(alias='time', pattern=r'^([01]\d|2[0-3]):[0-5]\d$'),
    use_case: ListSeatAvailabilityUseCase = Depends(ListSeatAvailabilityUseCase.depends),
) -> List[SeatAvailabilityResponse]:
    seats = await use_case.list_seats(
        cinema_id=cinema_id,
        booking_date=booking_date,
        booking_time=time.fromisoformat(booking_time),
    )
    return [SeatAvailabilityResponse.model_validate(seat, from_attributes=True) for seat in seats]
