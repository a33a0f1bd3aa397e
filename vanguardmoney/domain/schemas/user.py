import uuid
from datetime import datetime
from typing import Annotated
from typing import Any
from typing import Final

from pydantic import AfterValidator
from pydantic import BeforeValidator
from pydantic import EmailStr
from pydantic import Field
from pydantic import model_validator

from vanguardmoney.domain.schemas.base import BaseEntity

EMAIL_MIN_LENGTH: Final[int] = 5
EMAIL_MAX_LENGTH: Final[int] = 255

PASSWORD_SPECIAL_CHARACTERS: Final[str] = "@$!%*?&"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_email(value: Any) -> Any:
    if not isinstance(value, str):
        return value

    value = normalize_email(value)
    if not EMAIL_MIN_LENGTH <= len(value) <= EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be between {EMAIL_MIN_LENGTH} and {EMAIL_MAX_LENGTH} characters")
    return value


def check_password_strength(password: str) -> str:
    """Ensures the password mixes lowercase, uppercase, digit and special characters.

    All the missing character classes are reported at once.
    """
    missing = []
    if not any(char.islower() for char in password):
        missing.append("one lowercase letter")
    if not any(char.isupper() for char in password):
        missing.append("one uppercase letter")
    if not any(char.isdigit() for char in password):
        missing.append("one digit")
    if not any(char in PASSWORD_SPECIAL_CHARACTERS for char in password):
        missing.append(f"one special character ({PASSWORD_SPECIAL_CHARACTERS})")

    if missing:
        raise ValueError(f"Password must contain at least {', '.join(missing)}")
    return password


def strip_name(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


EmailField = Annotated[EmailStr, BeforeValidator(check_email)]
PasswordField = Annotated[str, Field(min_length=8, max_length=255), AfterValidator(check_password_strength)]
NameField = Annotated[Annotated[str, Field(max_length=50)] | None, BeforeValidator(strip_name)]


class UserRegister(BaseEntity):
    """Schema validating the fields of a registration.

    The email is trimmed and lowercased before its syntax is checked, so the
    validated value is the normalized one stored by the credential store.
    """

    email: EmailField
    password: PasswordField
    first_name: NameField = None
    last_name: NameField = None


class UserUpdate(BaseEntity):
    """Schema for updating an existing user.

    Allows for partial updates. At least one field must be provided, and the
    email, password and active flag cannot be explicitly set to None.
    """

    email: EmailField | None = None
    password: PasswordField | None = None
    first_name: NameField = None
    last_name: NameField = None
    is_active: bool | None = None

    @model_validator(mode="after")
    def validate_payload(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")

        # If those fields are set, then they cannot be None.
        protected_fields = {"email", "password", "is_active"}
        for field in protected_fields:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"The field '{field}' cannot be set to None")

        return self


class UserPublic(BaseEntity):
    """Safe projection of a user: the only user shape leaving the workflows.

    It never carries the password hash nor the soft-delete marker.
    """

    id: uuid.UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
