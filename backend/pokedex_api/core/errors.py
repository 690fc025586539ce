"""Error Hierarchy — typed, categorized exceptions for all Pokédex API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - to_response() always produces {success: false, error, message}
    - `error` is the human-readable category string, `message` the detail

Design Decisions:
    - Single hierarchy with PokedexError base: one FastAPI handler catches all
    - Client errors (4xx) logged at WARNING, server errors (5xx) at ERROR
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories, rendered as the envelope's `error` field."""
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    ROUTE_NOT_FOUND = "route_not_found"
    RATE_LIMITED = "rate_limited"
    DATABASE = "database"
    INTERNAL = "internal"


class PokedexError(Exception):
    """Base exception for all Pokédex API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        error: str,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.error = error
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "success": False,
            "error": self.error,
            "message": self.message,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(PokedexError):
    """Requested entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, message: str | None = None,
    ):
        super().__init__(
            message or f"No {resource_type} found with ID {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.NOT_FOUND,
            f"{resource_type} not found", 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class PokemonNotFoundError(ResourceNotFoundError):
    def __init__(self, pokemon_id: int):
        super().__init__("Pokémon", pokemon_id)


class TypeNotFoundError(ResourceNotFoundError):
    def __init__(self, type_name: str):
        super().__init__(
            "Type", type_name, f"No type found with name '{type_name}'",
        )


class ValidationError(PokedexError):
    """Write rejected: missing required field, bad value or uniqueness violation."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            "Validation error", 400,
        )
        self.field = field


class BadRequestError(PokedexError):
    """Malformed query parameter (non-numeric page, generation, ...)."""
    def __init__(self, message: str, parameter: str | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST,
            "Bad request", 400,
        )
        self.parameter = parameter


class RouteNotFoundError(PokedexError):
    """No route matches the method + path."""
    def __init__(self, method: str, path: str):
        super().__init__(
            f"The endpoint {method} {path} does not exist",
            "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            "Endpoint not found", 404,
        )


class RateLimitError(PokedexError):
    """Client exceeded the request budget for the current window."""
    def __init__(self, retry_after_seconds: int):
        super().__init__(
            "Please try again later.",
            "RATE_LIMITED", ErrorCategory.RATE_LIMITED,
            "Too many requests", 429,
        )
        self.retry_after_seconds = retry_after_seconds


# ─── Server Errors (500-level) ──────────────────────────────────

class DatabaseError(PokedexError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            "Internal server error", 500,
        )
        self.operation = operation


class InternalError(PokedexError):
    """Unexpected failure with no more specific category."""
    def __init__(self, message: str = "Something went wrong!"):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            "Internal server error", 500,
        )
