"""Seat map DTO."""

from decimal import Decimal

import attrs


@attrs.define(frozen=True)
class SeatAvailability:
    seat_id: int
    cinema_id: int
    seat_number: str
    row_number: str
    seat_type: str
    price: Decimal
    is_available: bool
