from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.di import Container
from src.service.cinema_booking.driving_adapter.http_controller.auth.jwt_auth import (
    CurrentUser,
    JwtAuth,
)


BEARER_PREFIX = 'bearer '


def extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """Authorization header wins over the session cookie"""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return cookie_token


@inject
async def get_current_user(
    authorization: Optional[str] = Header(None),
    token: Optional[str] = Cookie(None, alias='fastapiusersauth'),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> CurrentUser:
    return jwt_auth.get_current_user_from_jwt(extract_token(authorization, token))
