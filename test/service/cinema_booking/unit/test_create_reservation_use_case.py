"""
Unit tests for CreateReservationUseCase

Focus:
1. Fail fast in order: cinema -> seat -> seat/cinema match -> payment method -> availability
2. Nothing is written when any check fails
3. The booking copies the seat price and starts reserved / pending
"""

from decimal import Decimal

from prometheus_client import REGISTRY
import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.cinema_booking.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.cinema_booking.domain.booking_errors import (
    InvalidPaymentMethodError,
    InvalidReferenceError,
    SeatUnavailableError,
)
from src.service.cinema_booking.domain.entity.booking_entity import BookingStatus, PaymentStatus
from test.constants import SEAT_PRICE, SHOW_DATE, SHOW_TIME, TEST_USER_ID
from test.service.cinema_booking.unit.test_helpers import (
    CINEMA_ID,
    OTHER_CINEMA_ID,
    PAYMENT_METHOD_ID,
    SEAT_ID,
    RepositoryMocks,
    make_seat,
)


def _use_case(mocks: RepositoryMocks) -> CreateReservationUseCase:
    return CreateReservationUseCase(
        booking_command_repo=mocks.booking_command_repo,
        booking_query_repo=mocks.booking_query_repo,
        catalog_query_repo=mocks.catalog_query_repo,
        payment_method_query_repo=mocks.payment_method_query_repo,
    )


async def _reserve(use_case: CreateReservationUseCase, **overrides):
    params = {
        'user_id': TEST_USER_ID,
        'cinema_id': CINEMA_ID,
        'seat_id': SEAT_ID,
        'booking_date': SHOW_DATE,
        'booking_time': SHOW_TIME,
        'payment_method_id': PAYMENT_METHOD_ID,
    }
    params.update(overrides)
    return await use_case.create_reservation(**params)


@pytest.mark.unit
class TestCreateReservation:
    @pytest.mark.asyncio
    async def test_reserves_free_seat_with_seat_price(self):
        """
        Given: seat 12 of cinema 1 priced 12.50, free at 2024-05-01 19:00
        When: the user reserves it with an active payment method
        Then: booking is reserved / pending with amount 12.50 and is persisted once
        """
        mocks = RepositoryMocks()

        booking = await _reserve(_use_case(mocks))

        assert booking.booking_status == BookingStatus.RESERVED
        assert booking.payment_status == PaymentStatus.PENDING
        assert booking.total_amount == SEAT_PRICE
        assert booking.user_id == TEST_USER_ID
        assert booking.cinema_id == CINEMA_ID
        assert booking.seat_id == SEAT_ID
        assert booking.booking_date == SHOW_DATE
        assert booking.booking_time == SHOW_TIME
        assert booking.payment_method_id == PAYMENT_METHOD_ID
        assert booking.id is not None
        assert booking.created_at is not None
        mocks.booking_command_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_availability_is_checked_for_exact_showtime(self):
        mocks = RepositoryMocks()

        await _reserve(_use_case(mocks))

        call = mocks.booking_query_repo.is_seat_available.await_args
        assert call.kwargs['seat_id'] == SEAT_ID
        showtime = call.kwargs['showtime']
        assert showtime.cinema_id == CINEMA_ID
        assert showtime.booking_date == SHOW_DATE
        assert showtime.booking_time == SHOW_TIME

    @pytest.mark.asyncio
    async def test_seconds_are_dropped_from_showtime(self):
        mocks = RepositoryMocks()

        booking = await _reserve(
            _use_case(mocks), booking_time=SHOW_TIME.replace(second=42, microsecond=7)
        )

        assert booking.booking_time == SHOW_TIME

    @pytest.mark.asyncio
    async def test_unknown_cinema_fails_before_anything_else(self):
        mocks = RepositoryMocks()
        mocks.catalog_query_repo.get_cinema_by_id.return_value = None

        with pytest.raises(NotFoundError, match='cinema not found'):
            await _reserve(_use_case(mocks))

        mocks.catalog_query_repo.get_seat_by_id.assert_not_awaited()
        mocks.booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_seat_is_not_found(self):
        mocks = RepositoryMocks()
        mocks.catalog_query_repo.get_seat_by_id.return_value = None

        with pytest.raises(NotFoundError, match='seat not found'):
            await _reserve(_use_case(mocks))

        mocks.payment_method_query_repo.is_payment_method_active.assert_not_awaited()
        mocks.booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seat_of_another_cinema_is_invalid_reference(self):
        """
        Given: seat 12 belongs to cinema 2
        When: the request names cinema 1
        Then: InvalidReferenceError, payment method and availability never consulted
        """
        mocks = RepositoryMocks(seat=make_seat(cinema_id=OTHER_CINEMA_ID))

        with pytest.raises(InvalidReferenceError) as exc_info:
            await _reserve(_use_case(mocks))

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == 'invalid_reference'
        mocks.payment_method_query_repo.is_payment_method_active.assert_not_awaited()
        mocks.booking_query_repo.is_seat_available.assert_not_awaited()
        mocks.booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_payment_method_is_rejected(self):
        mocks = RepositoryMocks(payment_method_active=False)

        with pytest.raises(InvalidPaymentMethodError):
            await _reserve(_use_case(mocks))

        mocks.booking_query_repo.is_seat_available.assert_not_awaited()
        mocks.booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_occupied_seat_is_unavailable(self):
        mocks = RepositoryMocks(seat_available=False)

        with pytest.raises(SeatUnavailableError) as exc_info:
            await _reserve(_use_case(mocks))

        assert exc_info.value.status_code == 409
        mocks.booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_insert_race_surfaces_as_seat_unavailable(self):
        """
        Given: availability check says free, but another request inserts first
        When: the ledger insert hits the unique index
        Then: the caller sees SeatUnavailableError, not a storage error
        """
        mocks = RepositoryMocks()
        mocks.booking_command_repo.create.side_effect = SeatUnavailableError(
            'seat is already booked for the specified time'
        )

        with pytest.raises(SeatUnavailableError):
            await _reserve(_use_case(mocks))

    @pytest.mark.asyncio
    async def test_price_is_copied_not_referenced(self):
        mocks = RepositoryMocks(seat=make_seat(price=Decimal('7.25')))

        booking = await _reserve(_use_case(mocks))

        assert booking.total_amount == Decimal('7.25')


@pytest.mark.unit
class TestCreateReservationMetrics:
    @staticmethod
    def _count(result: str) -> float:
        return (
            REGISTRY.get_sample_value('booking_reservation_requests_total', {'result': result})
            or 0.0
        )

    @pytest.mark.asyncio
    async def test_success_is_counted(self):
        before = self._count('success')

        await _reserve(_use_case(RepositoryMocks()))

        assert self._count('success') == before + 1

    @pytest.mark.asyncio
    async def test_failure_is_counted_by_error_code(self):
        before = self._count('seat_unavailable')

        with pytest.raises(SeatUnavailableError):
            await _reserve(_use_case(RepositoryMocks(seat_available=False)))

        assert self._count('seat_unavailable') == before + 1
