"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.cinema_booking.app.command import (
    create_reservation_use_case,
    process_payment_use_case,
)
from src.service.cinema_booking.app.query import (
    get_cinema_use_case,
    list_cinemas_use_case,
    list_payment_methods_use_case,
    list_seat_availability_use_case,
    list_user_bookings_use_case,
)
from src.service.cinema_booking.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    create_reservation_use_case,
    process_payment_use_case,
    list_user_bookings_use_case,
    get_cinema_use_case,
    list_cinemas_use_case,
    list_seat_availability_use_case,
    list_payment_methods_use_case,
    current_user,
]
