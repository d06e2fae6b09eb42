# Test Utility Constants
from datetime import date, time
from decimal import Decimal


# Users (ids come from the identity service, no user table here)
TEST_USER_ID = 1
TEST_USER_EMAIL = 'viewer@test.com'
TEST_USER_NAME = 'Test Viewer'
ANOTHER_USER_ID = 2
ANOTHER_USER_EMAIL = 'another_viewer@test.com'
ANOTHER_USER_NAME = 'Another Viewer'

# Showtime
SHOW_DATE = date(2024, 5, 1)
SHOW_TIME = time(19, 0)
SHOW_DATE_STR = '2024-05-01'
SHOW_TIME_STR = '19:00'
LATE_SHOW_TIME = time(21, 30)

# Prices
SEAT_PRICE = Decimal('12.50')
PREMIUM_SEAT_PRICE = Decimal('18.00')
OTHER_CINEMA_SEAT_PRICE = Decimal('9.00')

# Routes
BOOKING_BASE = '/api/booking'
MY_BOOKINGS = f'{BOOKING_BASE}/my_booking'
CINEMA_BASE = '/api/cinema'
PAYMENT_METHOD_BASE = '/api/payment_method'


def booking_pay_route(booking_id: str) -> str:
    return f'{BOOKING_BASE}/{booking_id}/pay'


def cinema_seats_route(cinema_id: int) -> str:
    return f'{CINEMA_BASE}/{cinema_id}/seats'
