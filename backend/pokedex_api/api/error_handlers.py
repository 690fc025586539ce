"""Error Handlers — global exception handlers producing the {success: false} envelope.

Invariants:
    - PokedexError -> its own http_status and to_response()
    - RequestValidationError -> 400; body problems are "Validation error",
      query/path problems are "Bad request"
    - Unmatched path or method -> 404 "Endpoint not found"
    - Exception (catch-all) -> 500; exception text only when expose_details is set

Design Decisions:
    - Four-layer handler: domain (PokedexError), validation (Pydantic),
      routing (Starlette HTTPException), catch-all (Exception)
    - Extracted from main.py so the app factory stays short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokedex_api.core.errors import (
    BadRequestError, InternalError, PokedexError, RouteNotFoundError, ValidationError,
)

logger = logging.getLogger(__name__)

_LOCATIONS = ("body", "query", "path", "header")


def register_error_handlers(app: FastAPI, expose_details: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pokedex_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app, expose_details)


def _register_pokedex_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PokedexError)
    async def pokedex_error_handler(request: Request, exc: PokedexError):
        """Handle all Pokédex domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error(exc).to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing-level errors raised by Starlette (no matching route / method)."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            error = RouteNotFoundError(request.method, request.url.path)
            return JSONResponse(status_code=404, content=error.to_response())
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": "HTTP error", "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI, expose_details: bool) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — exception text only leaves the process in development."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        error = InternalError(str(exc)) if expose_details else InternalError()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.to_response(),
        )


def build_validation_error(exc: RequestValidationError) -> PokedexError:
    """Map Pydantic errors to ValidationError (body) or BadRequestError (query/path)."""
    errors = exc.errors()
    details = ", ".join(_describe(e) for e in errors) or "Invalid request data"
    if any(e["loc"] and e["loc"][0] == "body" for e in errors):
        return ValidationError(details)
    return BadRequestError(details)


def _describe(error: dict) -> str:
    loc = list(error["loc"])
    if loc and loc[0] in _LOCATIONS:
        loc = loc[1:]
    field = ".".join(str(part) for part in loc)
    return f"{field}: {error['msg']}" if field else error["msg"]
