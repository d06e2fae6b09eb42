from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.cinema_booking.app.command.process_payment_use_case import ProcessPaymentUseCase
from src.service.cinema_booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from src.service.cinema_booking.domain.entity.booking_entity import Booking
from src.service.cinema_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.cinema_booking.driving_adapter.http_controller.auth.jwt_auth import CurrentUser
from src.service.cinema_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingWithDetailsResponse,
    PaymentRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        user_id=booking.user_id,
        cinema_id=booking.cinema_id,
        seat_id=booking.seat_id,
        booking_date=booking.booking_date,
        booking_time=booking.booking_time,
        payment_method_id=booking.payment_method_id,
        payment_status=booking.payment_status.value,
        booking_status=booking.booking_status.value,
        total_amount=booking.total_amount,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('user.id', current_user.id)
        booking = await use_case.create_reservation(
            user_id=current_user.id,
            cinema_id=request.cinema_id,
            seat_id=request.seat_id,
            booking_date=request.booking_date,
            booking_time=request.booking_time,
            payment_method_id=request.payment_method_id,
        )
        span.set_attribute('booking.id', str(booking.id))
        return _to_response(booking)


@router.get('/my_booking', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_my_bookings(
    current_user: CurrentUser = Depends(get_current_user),
    use_case: ListUserBookingsUseCase = Depends(ListUserBookingsUseCase.depends),
) -> List[BookingWithDetailsResponse]:
    bookings = await use_case.get_user_bookings(current_user.id)
    return [
        BookingWithDetailsResponse.model_validate(booking, from_attributes=True)
        for booking in bookings
    ]


@router.post('/{booking_id}/pay')
@Logger.io
async def pay_booking(
    booking_id: UUID,
    request: PaymentRequest,
    current_user: CurrentUser = Depends(get_current_user),
    use_case: ProcessPaymentUseCase = Depends(ProcessPaymentUseCase.depends),
) -> BookingResponse:
    booking = await use_case.process_payment(
        user_id=current_user.id,
        booking_id=booking_id,
        payment_method_id=request.payment_method_id,
    )
    return _to_response(booking)
