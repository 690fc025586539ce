"""Pokédex API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {success: false, error, message}
    - CORS, rate limit and logging configured from settings (not hardcoded)
    - Database engine created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event; uvicorn turns SIGTERM/SIGINT into lifespan shutdown
    - Tables created if absent at startup (DATABASE_AUTO_CREATE); Alembic for managed schemas
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from pokedex_api import __version__
from pokedex_api.api.error_handlers import register_error_handlers
from pokedex_api.api.middleware import register_middleware
from pokedex_api.api.routes import health, pokemon, root, search, types
from pokedex_api.config import get_settings
from pokedex_api.infrastructure.database import close_db, init_db
from pokedex_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.resolved_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
        echo=settings.is_development,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info(
        f"Pokémon API started (environment={settings.environment})",
    )
    yield
    logger.info("Pokémon API shutting down")
    await close_db()


app = FastAPI(
    title="Pokémon Database API",
    description="A comprehensive RESTful API for Pokémon data",
    version=__version__,
    lifespan=lifespan,
)

settings = get_settings()
register_middleware(app, settings)
register_error_handlers(app, expose_details=settings.is_development)

# Routes (explicit registration, no auto-discovery)
app.include_router(root.router)
app.include_router(health.router)
app.include_router(pokemon.router)
app.include_router(types.router)
app.include_router(search.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "pokedex_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
