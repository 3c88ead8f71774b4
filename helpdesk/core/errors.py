# helpdesk/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class HelpdeskError(Exception):
    """Base for errors raised by services. Rendered as ``{"error": message}``."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HelpdeskError):
    status_code = 404


class RequesterMismatchError(HelpdeskError):
    status_code = 403


class ConflictError(HelpdeskError):
    status_code = 409


def _error(status_code: int, error) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


async def helpdesk_error_handler(request: Request, exc: HelpdeskError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, exc.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.warning("%s %s invalid payload: %s", request.method, request.url.path, errors)
    return _error(422, errors)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HelpdeskError, helpdesk_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)


__all__ = [
    "HelpdeskError",
    "NotFoundError",
    "RequesterMismatchError",
    "ConflictError",
    "register_error_handlers",
]
