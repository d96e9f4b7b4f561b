"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import Database, DatabaseConfig, DatabaseError
from ..errors import (
    EventBookError,
    ConstraintError,
    RecordNotFoundError,
    ReferentialError,
    ValidationError,
)
from .routes import (
    bookings,
    events,
    health
)

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

# Checked in order, first match wins
ERROR_STATUS_CODES = [
    (RecordNotFoundError, 404),
    (ConstraintError, 409),
    (ReferentialError, 422),
    (ValidationError, 422),
    (DatabaseError, 503),
]

def status_code_for(exc: Exception) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500

async def handle_domain_error(request: Request, exc: EventBookError) -> JSONResponse:
    """Map domain errors to JSON responses naming the offending field."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        detail = "Database unavailable" if status_code == 503 else "Internal server error"
    else:
        detail = str(exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "field": getattr(exc, 'field', None)},
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    database: Database = app.state.database
    # Startup
    try:
        await database.connect()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield
    # Shutdown
    await database.dispose()

def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The application owns the single Database instance for the process.

    Args:
        database: Pre-built database, mainly for tests. Built from the
                  environment when omitted.

    Raises:
        ConfigurationError: If DATABASE_URL is not set
    """
    if database is None:
        database = Database(DatabaseConfig.from_env())

    app = FastAPI(
        title="Eventbook API",
        description="API for managing events and bookings",
        version="1.0.0",
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.database = database

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    app.add_exception_handler(EventBookError, handle_domain_error)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(events.router, prefix="/api")
    app.include_router(bookings.router, prefix="/api")

    return app
