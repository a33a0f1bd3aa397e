import uuid
from dataclasses import dataclass
from datetime import UTC
from datetime import datetime
from datetime import timedelta

import jwt
from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import Argon2Error
from pydantic import ValidationError

from vanguardmoney.domain.exceptions import InvalidToken
from vanguardmoney.domain.exceptions import TokenExpired
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.auth import TokenClaims


class Argon2PasswordHasher(PasswordHasherPort):
    """An implementation of the `PasswordHasherPort` using the Argon2 algorithm.

    Each hash embeds its own random salt and cost parameters, so hashes produced
    with a former cost factor keep verifying after the setting changes.
    """

    def __init__(self, cost_factor: int = 12, memory_cost: int = 65536) -> None:
        self._ph = Argon2Hasher(time_cost=cost_factor, memory_cost=memory_cost)

    def hash(self, password: str) -> str:
        return self._ph.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._ph.verify(hashed_password, plain_password)
        except (Argon2Error, ValueError):
            return False


@dataclass(frozen=True)
class JwtConfig:
    secret_key: str
    expires_in: str
    ttl: timedelta
    issuer: str = "vanguardmoney-auth"
    algorithm: str = "HS256"


class JwtAccessTokenManager(AccessTokenManagerPort):
    """An implementation of the `AccessTokenManagerPort` using JSON Web Tokens (JWT).

    Tokens carry the user ID twice (`user_id` and `sub`), the issuer and the
    issue and expiry instants. They are signed with a symmetric secret through
    the `PyJWT` library.
    """

    REQUIRED_CLAIMS = ["user_id", "sub", "iss", "iat", "exp"]

    def __init__(self, config: JwtConfig) -> None:
        self._config = config

    @property
    def expires_in(self) -> str:
        return self._config.expires_in

    def issue(self, user_id: uuid.UUID) -> str:
        now = datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "sub": str(user_id),
            "iss": self._config.issuer,
            "iat": now,
            "exp": now + self._config.ttl,
        }
        return jwt.encode(payload, self._config.secret_key, algorithm=self._config.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                issuer=self._config.issuer,
                options={"require": self.REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpired() from e
        except jwt.InvalidTokenError as e:
            raise InvalidToken() from e

        try:
            claims = TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise InvalidToken() from e

        if str(claims.user_id) != claims.sub:
            raise InvalidToken()

        return claims
