"""Error signals raised by handlers and the JSON responders that render them.

Every failure a client can trigger is an ``AppError`` carrying an HTTP status
code and a message. Handlers raise it and stop; the exception handlers
registered on the app turn it into ``{"status": "failed", "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

FIELDS_INVALID = "欄位未填寫正確"
ROUTE_NOT_FOUND = "無此路由資訊"
SERVER_ERROR = "伺服器錯誤"


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = SERVER_ERROR

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class FieldValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = FIELDS_INVALID


class NotFoundError(AppError):
    # Missing entities are reported as 400, clients depend on it.
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class MutationFailure(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


def make_error(status_code: int, message: str) -> AppError:
    return AppError(message, status_code=status_code)


def _failed(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "failed", "message": message},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _failed(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"{FIELDS_INVALID}: {request.method} {request.url.path}")
    return _failed(status.HTTP_400_BAD_REQUEST, FIELDS_INVALID)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _failed(exc.status_code, ROUTE_NOT_FOUND)
    return _failed(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": SERVER_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
