from enum import StrEnum


class ErrorCode(StrEnum):
    """Closed set of error codes reported to callers of the workflows."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_INACTIVE = "USER_INACTIVE"
    LOGIN_FAILED = "LOGIN_FAILED"
    NO_TOKEN = "NO_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_VERIFICATION_FAILED = "TOKEN_VERIFICATION_FAILED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_FETCH_FAILED = "PROFILE_FETCH_FAILED"
    TRANSACTION_RECORD_FAILED = "TRANSACTION_RECORD_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TransactionKind(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"
