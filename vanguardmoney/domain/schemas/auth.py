import uuid
from datetime import datetime

from vanguardmoney.domain.schemas.base import BaseEntity
from vanguardmoney.domain.schemas.user import UserPublic


class TokenClaims(BaseEntity):
    """Decoded claims of a verified access token."""

    user_id: uuid.UUID
    sub: str
    iss: str
    iat: datetime
    exp: datetime


class AuthSession(BaseEntity):
    user: UserPublic
    access_token: str
    token_type: str = "Bearer"
    expires_in: str


class TokenVerification(BaseEntity):
    user: UserPublic
    claims: TokenClaims
