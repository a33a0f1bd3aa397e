from dataclasses import dataclass
from typing import ClassVar

from vanguardmoney.domain.types import ErrorCode


class DomainError(Exception):
    """Base class of the errors a workflow reports to its caller.

    Each subclass is tagged with an `ErrorCode` and a default message, so that
    entrypoints can render them without inspecting the message text.
    """

    code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR
    default_message: ClassVar[str] = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class UserValidationError(DomainError):
    code = ErrorCode.VALIDATION_ERROR
    default_message = "Validation error"

    def __init__(self, details: list[FieldError], message: str | None = None) -> None:
        super().__init__(message)
        self.details = details


class EmailAlreadyExists(DomainError):
    code = ErrorCode.EMAIL_ALREADY_EXISTS
    default_message = "Email already registered"


class RegistrationFailed(DomainError):
    code = ErrorCode.REGISTRATION_FAILED
    default_message = "Unable to register the user"


class InvalidCredentials(DomainError):
    code = ErrorCode.INVALID_CREDENTIALS
    default_message = "Invalid credentials"


class UserInactive(DomainError):
    code = ErrorCode.USER_INACTIVE
    default_message = "User account is inactive"


class LoginFailed(DomainError):
    code = ErrorCode.LOGIN_FAILED
    default_message = "Unable to log in"


class TokenMissing(DomainError):
    code = ErrorCode.NO_TOKEN
    default_message = "Access token required"


class TokenExpired(DomainError):
    code = ErrorCode.TOKEN_EXPIRED
    default_message = "Token has expired"


class InvalidToken(DomainError):
    code = ErrorCode.INVALID_TOKEN
    default_message = "Invalid token"


class TokenVerificationFailed(DomainError):
    code = ErrorCode.TOKEN_VERIFICATION_FAILED
    default_message = "Unable to verify the token"


class UserNotFound(DomainError):
    code = ErrorCode.USER_NOT_FOUND
    default_message = "User not found"


class ProfileFetchFailed(DomainError):
    code = ErrorCode.PROFILE_FETCH_FAILED
    default_message = "Unable to fetch the profile"


class TransactionRecordFailed(DomainError):
    code = ErrorCode.TRANSACTION_RECORD_FAILED
    default_message = "Unable to record the transaction"


# --- Store errors ---


class DuplicateEmailError(Exception):
    """Raised by the credential store when the email unique constraint is violated."""

    pass


class CredentialStoreUnavailable(Exception):
    """Raised by the stores when the database cannot be reached."""

    pass
