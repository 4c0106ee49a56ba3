# app/core/errors.py
"""Application errors and the handlers that turn them into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors raised by request handlers."""

    code = "app_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotAuthenticatedError(AppError):
    code = "not_authenticated"

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class UserNotFoundError(AppError):
    """The requester's user record does not exist."""

    code = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class TicketNotFoundError(AppError):
    code = "ticket_not_found"

    def __init__(self, message: str = "Ticket not found"):
        super().__init__(message)


class NotAuthorizedError(AppError):
    """The requester is known but may not touch the resource."""

    code = "not_authorized"

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class BadRequestError(AppError):
    code = "bad_request"

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


# Missing users and forbidden access both answer 401 unless overridden
DEFAULT_STATUS_CODES: dict[str, int] = {
    NotAuthenticatedError.code: 401,
    UserNotFoundError.code: 401,
    TicketNotFoundError.code: 404,
    NotAuthorizedError.code: 401,
    BadRequestError.code: 400,
}


def status_code_for(error: AppError, settings: Settings) -> int:
    if error.code in settings.ERROR_STATUS_OVERRIDES:
        return settings.ERROR_STATUS_OVERRIDES[error.code]
    return DEFAULT_STATUS_CODES.get(error.code, 500)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_code_for(exc, get_settings())
    return JSONResponse(status_code=status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "invalid"))
    return JSONResponse(status_code=422, content={"message": "; ".join(problems) or "Invalid request"})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Database error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)


__all__ = [
    "AppError",
    "BadRequestError",
    "DEFAULT_STATUS_CODES",
    "NotAuthenticatedError",
    "NotAuthorizedError",
    "TicketNotFoundError",
    "UserNotFoundError",
    "register_error_handlers",
    "status_code_for",
]
