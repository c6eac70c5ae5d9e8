from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger


class QueryError(Exception):
    """Base for every failure the listing endpoint reports as ``{"error": ...}``."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QueryError):
    """A query parameter is malformed or outside its accepted set."""

    status_code = HTTPStatus.BAD_REQUEST


class DecodeError(ValidationError):
    """The pagination cursor could not be decoded."""

    def __init__(self, message: str = "Invalid cursor"):
        super().__init__(message)


class StoreError(QueryError):
    """The record store failed. The message is surfaced to the client as is."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI):
    """Register exception handlers for the FastAPI app"""

    @app.exception_handler(QueryError)
    async def query_error_handler(request: Request, exc: QueryError):
        if exc.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=int(exc.status_code), content={"error": exc.message})
