"""Booking listing projection DTO."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs


@attrs.define(frozen=True)
class BookingDetail:
    """
    A booking joined with the catalog data at the time of the read.

    Cinema, seat and payment method names reflect the current catalog;
    only total_amount is frozen at booking time.
    """

    id: UUID
    user_id: int
    cinema_id: int
    seat_id: int
    booking_date: date
    booking_time: time
    payment_status: str
    booking_status: str
    total_amount: Decimal
    cinema_name: str
    cinema_location: str
    seat_number: str
    seat_type: str
    payment_method_id: Optional[int] = None
    payment_method_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
