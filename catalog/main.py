"""Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError and validation errors to {"error": ...}
    - CORS configured from settings (not hardcoded)
    - Database opened and verified on startup, disposed on shutdown (lifespan)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import articles, health, products
from catalog.config import get_settings
from catalog.infrastructure.database import close_db, init_db
from catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await manager.verify_connection()
        if settings.database_create_tables:
            await manager.create_tables()
    except Exception:
        await close_db()
        raise
    logger.info("Catalog API started")
    yield
    await close_db()
    logger.info("Catalog API shut down")


app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(products.router)
app.include_router(articles.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
