from src.service.cinema_booking.driving_adapter.http_controller.auth.jwt_auth import (
    CurrentUser,
    JwtAuth,
)
from test.constants import (
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_ID,
    ANOTHER_USER_NAME,
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_NAME,
)


_KNOWN_USERS = {
    TEST_USER_ID: CurrentUser(id=TEST_USER_ID, email=TEST_USER_EMAIL, name=TEST_USER_NAME),
    ANOTHER_USER_ID: CurrentUser(
        id=ANOTHER_USER_ID, email=ANOTHER_USER_EMAIL, name=ANOTHER_USER_NAME
    ),
}


def token_for(user_id: int = TEST_USER_ID) -> str:
    user = _KNOWN_USERS.get(user_id) or CurrentUser(
        id=user_id, email=f'user{user_id}@test.com', name=f'User {user_id}'
    )
    return JwtAuth().create_jwt_token(user)


def bearer_headers(user_id: int = TEST_USER_ID) -> dict[str, str]:
    return {'Authorization': f'Bearer {token_for(user_id)}'}
