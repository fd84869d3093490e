"""Error kinds raised by the store and the request layer, with their HTTP status."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("beercount.errors")


class BeerCountError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error") -> None:
        self.message = message
        super().__init__(message)


class BadRequest(BeerCountError):
    """Malformed JSON, an unparseable path id or an oversized body."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(BeerCountError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} {entity_id} not found")


class StorageError(BeerCountError):
    """The database engine failed (I/O, schema or constraint problems)."""


class ConstraintError(StorageError):
    pass


class EncodingError(BeerCountError):
    pass


def _error_response(exc: BeerCountError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BeerCountError)
    async def handle_beer_count_error(request: Request, exc: BeerCountError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(ResponseValidationError)
    async def handle_response_validation_error(request: Request, exc: ResponseValidationError) -> JSONResponse:
        logger.error("%s %s could not encode response: %s", request.method, request.url.path, exc.errors())
        return _error_response(EncodingError("Problem encoding response to json"))
