"""Centralized mapping of domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotel_search.domain import exceptions as domain_exceptions

logger = logging.getLogger(__name__)


def _domain_error_handler(status_code: int, default_detail: str):
    def _handler(request: Request, exc: domain_exceptions.DomainError) -> JSONResponse:
        detail = str(exc) or default_detail
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, detail)
        return JSONResponse(status_code=status_code, content={"detail": detail})

    return _handler


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    # Hide internal details
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        domain_exceptions.HotelNotFoundError, _domain_error_handler(404, "Not Found")
    )
    app.add_exception_handler(
        domain_exceptions.HotelConflictError, _domain_error_handler(409, "Conflict")
    )
    app.add_exception_handler(
        domain_exceptions.InvalidArgumentError, _domain_error_handler(400, "Bad Request")
    )
    app.add_exception_handler(
        domain_exceptions.OutOfRangeError, _domain_error_handler(400, "Bad Request")
    )
    app.add_exception_handler(
        domain_exceptions.NullArgumentError, _domain_error_handler(400, "Bad Request")
    )
    app.add_exception_handler(Exception, _unhandled_exception_handler)
