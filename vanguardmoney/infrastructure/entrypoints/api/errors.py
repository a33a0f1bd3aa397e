import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import FieldError
from vanguardmoney.domain.exceptions import UserValidationError
from vanguardmoney.domain.types import ErrorCode
from vanguardmoney.infrastructure.entrypoints.api.schemas import ErrorResponse
from vanguardmoney.infrastructure.entrypoints.api.schemas import FieldErrorResponse

logger = logging.getLogger(__name__)

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_INACTIVE: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NO_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[FieldError] | None = None,
) -> JSONResponse:
    content = ErrorResponse(
        message=message,
        error=code,
        details=[FieldErrorResponse.model_validate(detail) for detail in details] if details is not None else None,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None

    return JSONResponse(
        status_code=status_code,
        content=content.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DomainError):
        return await internal_error_handler(request, exc)

    details = exc.details if isinstance(exc, UserValidationError) else None
    status_code = STATUS_CODES.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return error_response(status_code, exc.code, exc.message, details)


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        return await internal_error_handler(request, exc)

    details = [
        FieldError(
            # Drop the request part ("body", "query"...) from the location.
            field=".".join(str(loc) for loc in error["loc"][1:]) or str(error["loc"][0]),
            message=error["msg"],
        )
        for error in exc.errors()
    ]

    return error_response(status.HTTP_400_BAD_REQUEST, ErrorCode.VALIDATION_ERROR, "Validation error", details)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, CredentialStoreUnavailable):
        logger.error(f"Credential store unavailable on {request.method} {request.url.path}: {exc}")
    else:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(CredentialStoreUnavailable, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
