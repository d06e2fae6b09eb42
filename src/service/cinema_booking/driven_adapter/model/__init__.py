"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.cinema_booking.driven_adapter.model.booking_model import BookingModel
from src.service.cinema_booking.driven_adapter.model.cinema_model import CinemaModel
from src.service.cinema_booking.driven_adapter.model.payment_method_model import (
    PaymentMethodModel,
)
from src.service.cinema_booking.driven_adapter.model.seat_model import SeatModel

__all__ = [
    'BookingModel',
    'CinemaModel',
    'PaymentMethodModel',
    'SeatModel',
]
