from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.cinema_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema_booking.app.interface.i_payment_method_query_repo import (
    IPaymentMethodQueryRepo,
)
from src.service.cinema_booking.domain.booking_errors import (
    AlreadyPaidError,
    InvalidPaymentMethodError,
    UnauthorizedBookingError,
)
from src.service.cinema_booking.domain.entity.booking_entity import Booking


class ProcessPaymentUseCase:
    """
    Move a reserved booking to paid.

    No settlement call is made; paying is the local transition of
    payment_status and booking_status, written together in one statement.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        payment_method_query_repo: IPaymentMethodQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.payment_method_query_repo = payment_method_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        payment_method_query_repo: IPaymentMethodQueryRepo = Depends(
            Provide[Container.payment_method_query_repo]
        ),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            payment_method_query_repo=payment_method_query_repo,
        )

    @Logger.io
    async def process_payment(
        self, *, user_id: int, booking_id: UUID, payment_method_id: int
    ) -> Booking:
        """
        Raises:
            NotFoundError: booking does not exist
            UnauthorizedBookingError: booking belongs to another user
            AlreadyPaidError: booking already paid, including a concurrent payment winning
            InvalidPaymentMethodError: payment method unknown or inactive
        """
        with self.tracer.start_as_current_span(
            'use_case.process_payment',
            attributes={'user.id': user_id, 'booking.id': str(booking_id)},
        ):
            try:
                paid_booking = await self._pay(
                    user_id=user_id, booking_id=booking_id, payment_method_id=payment_method_id
                )
            except CustomBaseError as e:
                metrics.record_payment(result=e.error_code)
                raise

        metrics.record_payment(result='success')
        Logger.base.info(f'💳 [PAYMENT] Booking {booking_id} paid by user {user_id}')
        return paid_booking

    async def _pay(self, *, user_id: int, booking_id: UUID, payment_method_id: int) -> Booking:
        booking = await self.booking_command_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('booking not found')

        if booking.user_id != user_id:
            raise UnauthorizedBookingError('unauthorized')

        booking.validate_can_be_paid()

        if not await self.payment_method_query_repo.is_payment_method_active(
            payment_method_id=payment_method_id
        ):
            raise InvalidPaymentMethodError('invalid payment method')

        paid_booking = await self.booking_command_repo.mark_as_paid_atomically(
            booking=booking.mark_as_paid()
        )
        if not paid_booking:
            # A concurrent payment flipped the row between our read and write
            raise AlreadyPaidError('booking is already paid')
        return paid_booking
