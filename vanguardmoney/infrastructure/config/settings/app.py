import re
from datetime import timedelta
from typing import Final

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from vanguardmoney import BASE_DIR
from vanguardmoney.infrastructure.types import LogHandler
from vanguardmoney.infrastructure.types import LogLevel

TTL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<value>\d+)(?P<unit>[smhd]?)$")
TTL_UNITS: Final[dict[str, str]] = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_ttl(value: str) -> timedelta:
    """Parses a duration label such as "24h", "30m" or "3600" (seconds)."""
    match = TTL_PATTERN.match(value.strip())
    if not match or int(match["value"]) <= 0:
        raise ValueError(f"Invalid duration '{value}': expected a positive integer optionally followed by s, m, h or d")

    return timedelta(**{TTL_UNITS[match["unit"]]: int(match["value"])})


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VANGUARDMONEY_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    SECRET_KEY: str = Field(..., min_length=32)

    API_V1_PREFIX: str = "/api/v1"

    ACCESS_TOKEN_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRES_IN: str = "24h"
    ACCESS_TOKEN_ISSUER: str = "vanguardmoney-auth"

    PASSWORD_HASH_COST: int = Field(default=12, ge=1)
    PASSWORD_HASH_MEMORY_COST: int = Field(default=65536, ge=8)

    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    LOG_LEVEL: LogLevel = "INFO"
    LOG_HANDLERS: list[LogHandler] = ["console"]

    LOG_LEVEL_CLI: LogLevel = "INFO"
    LOG_HANDLERS_CLI: list[LogHandler] = ["cli"]

    @field_validator("ACCESS_TOKEN_EXPIRES_IN")
    @classmethod
    def validate_expires_in(cls, value: str) -> str:
        parse_ttl(value)
        return value.strip()

    @property
    def access_token_ttl(self) -> timedelta:
        return parse_ttl(self.ACCESS_TOKEN_EXPIRES_IN)


app_settings = AppSettings()
