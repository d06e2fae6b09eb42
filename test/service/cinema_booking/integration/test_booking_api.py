"""
API tests for /api/booking

TestClient against the full app: routing, auth, validation and error mapping.
"""

from decimal import Decimal

from fastapi.testclient import TestClient
import pytest
from uuid_utils.compat import uuid7

from test.constants import (
    ANOTHER_USER_ID,
    BOOKING_BASE,
    MY_BOOKINGS,
    SEAT_PRICE,
    SHOW_DATE_STR,
    SHOW_TIME_STR,
    TEST_USER_ID,
    booking_pay_route,
)
from test.shared.auth import token_for
from test.shared.catalog import SeededCatalog


def _booking_payload(catalog: SeededCatalog, **overrides) -> dict:
    payload = {
        'cinema_id': catalog.cinema_id,
        'seat_id': catalog.seat_id,
        'date': SHOW_DATE_STR,
        'time': SHOW_TIME_STR,
        'payment_method_id': catalog.payment_method_id,
    }
    payload.update(overrides)
    return payload


def _reserve(client: TestClient, catalog: SeededCatalog, headers: dict, **overrides):
    return client.post(BOOKING_BASE, json=_booking_payload(catalog, **overrides), headers=headers)


@pytest.mark.integration
class TestCreateBookingApi:
    def test_reservation_returns_201(self, client, seeded_catalog, auth_headers):
        response = _reserve(client, seeded_catalog, auth_headers())

        assert response.status_code == 201
        body = response.json()
        assert body['user_id'] == TEST_USER_ID
        assert body['cinema_id'] == seeded_catalog.cinema_id
        assert body['seat_id'] == seeded_catalog.seat_id
        assert body['booking_date'] == SHOW_DATE_STR
        assert body['booking_time'] == SHOW_TIME_STR
        assert body['payment_status'] == 'pending'
        assert body['booking_status'] == 'reserved'
        assert Decimal(body['total_amount']) == SEAT_PRICE
        assert body['id']

    def test_double_booking_returns_409(self, client, seeded_catalog, auth_headers):
        assert _reserve(client, seeded_catalog, auth_headers()).status_code == 201

        response = _reserve(client, seeded_catalog, auth_headers(ANOTHER_USER_ID))

        assert response.status_code == 409
        assert response.json()['error'] == 'seat_unavailable'

    def test_seat_of_other_cinema_returns_400(self, client, seeded_catalog, auth_headers):
        response = _reserve(
            client, seeded_catalog, auth_headers(), seat_id=seeded_catalog.other_cinema_seat_id
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'invalid_reference'

    def test_inactive_payment_method_returns_400(self, client, seeded_catalog, auth_headers):
        response = _reserve(
            client,
            seeded_catalog,
            auth_headers(),
            payment_method_id=seeded_catalog.inactive_payment_method_id,
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'invalid_payment_method'

    def test_unknown_seat_returns_404(self, client, seeded_catalog, auth_headers):
        response = _reserve(client, seeded_catalog, auth_headers(), seat_id=9999)

        assert response.status_code == 404
        assert response.json() == {'detail': 'seat not found', 'error': 'not_found'}

    @pytest.mark.parametrize('bad_time', ['7pm', '19:00:00', '24:00', '9:00'])
    def test_malformed_time_returns_400(self, client, seeded_catalog, auth_headers, bad_time):
        response = _reserve(client, seeded_catalog, auth_headers(), time=bad_time)

        assert response.status_code == 400
        assert response.json()['error'] == 'validation_error'

    def test_missing_field_returns_400(self, client, seeded_catalog, auth_headers):
        payload = _booking_payload(seeded_catalog)
        del payload['date']

        response = client.post(BOOKING_BASE, json=payload, headers=auth_headers())

        assert response.status_code == 400

    def test_without_token_returns_401(self, client, seeded_catalog):
        response = client.post(BOOKING_BASE, json=_booking_payload(seeded_catalog))

        assert response.status_code == 401
        assert response.json()['error'] == 'not_authenticated'

    def test_garbage_token_returns_401(self, client, seeded_catalog):
        response = _reserve(
            client, seeded_catalog, {'Authorization': 'Bearer not-a-jwt'}
        )

        assert response.status_code == 401

    def test_session_cookie_authenticates(self, client, seeded_catalog):
        client.cookies.set('fastapiusersauth', token_for(ANOTHER_USER_ID))

        response = client.post(BOOKING_BASE, json=_booking_payload(seeded_catalog))

        assert response.status_code == 201
        assert response.json()['user_id'] == ANOTHER_USER_ID


@pytest.mark.integration
class TestPayBookingApi:
    def test_owner_pays_booking(self, client, seeded_catalog, auth_headers):
        booking_id = _reserve(client, seeded_catalog, auth_headers()).json()['id']

        response = client.post(
            booking_pay_route(booking_id),
            json={'payment_method_id': seeded_catalog.payment_method_id},
            headers=auth_headers(),
        )

        assert response.status_code == 200
        body = response.json()
        assert body['id'] == booking_id
        assert body['payment_status'] == 'paid'
        assert body['booking_status'] == 'paid'
        assert Decimal(body['total_amount']) == SEAT_PRICE

    def test_second_payment_returns_409(self, client, seeded_catalog, auth_headers):
        booking_id = _reserve(client, seeded_catalog, auth_headers()).json()['id']
        pay = {'payment_method_id': seeded_catalog.payment_method_id}
        client.post(booking_pay_route(booking_id), json=pay, headers=auth_headers())

        response = client.post(booking_pay_route(booking_id), json=pay, headers=auth_headers())

        assert response.status_code == 409
        assert response.json()['error'] == 'already_paid'

    def test_other_user_gets_403(self, client, seeded_catalog, auth_headers):
        booking_id = _reserve(client, seeded_catalog, auth_headers()).json()['id']

        response = client.post(
            booking_pay_route(booking_id),
            json={'payment_method_id': seeded_catalog.payment_method_id},
            headers=auth_headers(ANOTHER_USER_ID),
        )

        assert response.status_code == 403
        assert response.json()['error'] == 'unauthorized'

    def test_unknown_booking_returns_404(self, client, seeded_catalog, auth_headers):
        response = client.post(
            booking_pay_route(str(uuid7())),
            json={'payment_method_id': seeded_catalog.payment_method_id},
            headers=auth_headers(),
        )

        assert response.status_code == 404

    def test_malformed_booking_id_returns_400(self, client, seeded_catalog, auth_headers):
        response = client.post(
            booking_pay_route('not-a-uuid'),
            json={'payment_method_id': seeded_catalog.payment_method_id},
            headers=auth_headers(),
        )

        assert response.status_code == 400


@pytest.mark.integration
class TestMyBookingsApi:
    def test_lists_own_bookings_with_details(self, client, seeded_catalog, auth_headers):
        first = _reserve(client, seeded_catalog, auth_headers()).json()
        second = _reserve(
            client, seeded_catalog, auth_headers(), seat_id=seeded_catalog.premium_seat_id
        ).json()
        _reserve(
            client,
            seeded_catalog,
            auth_headers(ANOTHER_USER_ID),
            seat_id=seeded_catalog.second_seat_id,
        )

        response = client.get(MY_BOOKINGS, headers=auth_headers())

        assert response.status_code == 200
        bookings = response.json()
        assert [b['id'] for b in bookings] == [second['id'], first['id']]
        assert bookings[0]['cinema_name'] == 'Grand Cinema'
        assert bookings[0]['seat_type'] == 'premium'
        assert bookings[0]['payment_method_name'] == 'credit_card'
        assert bookings[0]['booking_time'] == SHOW_TIME_STR

    def test_empty_when_no_bookings(self, client, seeded_catalog, auth_headers):
        response = client.get(MY_BOOKINGS, headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == []

    def test_requires_authentication(self, client, seeded_catalog):
        assert client.get(MY_BOOKINGS).status_code == 401
