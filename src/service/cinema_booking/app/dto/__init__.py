"""Application layer DTOs"""

from src.service.cinema_booking.app.dto.booking_detail import BookingDetail
from src.service.cinema_booking.app.dto.cinema_page import CinemaPage
from src.service.cinema_booking.app.dto.seat_availability import SeatAvailability

__all__ = ['BookingDetail', 'CinemaPage', 'SeatAvailability']
