"""HTTP Middleware — CORS, compression, security headers, rate limiting, request logging.

Invariants:
    - Execution order (outermost first): request logging, CORS, gzip,
      security headers, rate limiting, routes
    - Rate limiting applies only to paths under /api/; /, /health and /docs are exempt
    - Rate-limited responses carry the standard error envelope and RateLimit-* headers

Design Decisions:
    - Starlette add_middleware wraps, so registration happens innermost first
    - Limiter lives on app.state.rate_limiter so tests can reset or replace it
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from pokedex_api.config import Settings
from pokedex_api.core.errors import RateLimitError
from pokedex_api.infrastructure.rate_limit import RequestRateLimiter

logger = logging.getLogger(__name__)

RATE_LIMITED_PREFIX = "/api/"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "X-XSS-Protection": "0",
}


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install the middleware stack on `app`."""
    app.state.rate_limiter = RequestRateLimiter(
        settings.rate_limit_max_requests, settings.rate_limit_window_seconds,
    )
    app.state.rate_limit_enabled = settings.rate_limit_enabled

    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(security_headers_middleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def rate_limit_middleware(request: Request, call_next):
    if (
        not request.app.state.rate_limit_enabled
        or not request.url.path.startswith(RATE_LIMITED_PREFIX)
    ):
        return await call_next(request)

    result = request.app.state.rate_limiter.check(_client_key(request))
    headers = {
        "RateLimit-Limit": str(result.limit),
        "RateLimit-Remaining": str(result.remaining),
        "RateLimit-Reset": str(result.reset_after),
    }
    if not result.allowed:
        logger.warning(
            "Rate limit exceeded",
            extra={"client": _client_key(request), "path": request.url.path},
        )
        error = RateLimitError(result.reset_after)
        return JSONResponse(
            status_code=error.http_status,
            content=error.to_response(),
            headers={**headers, "Retry-After": str(result.reset_after)},
        )
    response = await call_next(request)
    response.headers.update(headers)
    return response


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "client": _client_key(request),
        },
    )
    return response
