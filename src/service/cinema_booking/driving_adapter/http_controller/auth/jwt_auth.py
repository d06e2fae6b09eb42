"""
Token validation for the booking API

Tokens are issued by the identity service; this service only checks the
signature and expiry and rebuilds the caller from the claims (no DB query).
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import attrs
import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


@attrs.define(frozen=True)
class CurrentUser:
    id: int
    email: str
    name: str


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, user: CurrentUser, *, expires_in: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user.id),
            'exp': now + (expires_in or timedelta(minutes=self.token_expire_minutes)),
            'iat': now,
            'user_id': user.id,
            'email': user.email,
            'name': user.name,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    def get_current_user_from_jwt(self, token: Optional[str]) -> CurrentUser:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        name = payload.get('name')
        if not isinstance(user_id, int) or not email or not name:
            raise AuthenticationError('Invalid token')

        return CurrentUser(id=user_id, email=email, name=name)
