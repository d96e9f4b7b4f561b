"""Health check routes for the FastAPI application."""

from fastapi import APIRouter, Depends

from ... import __version__
from ...config.environment import IS_PRODUCTION_ENVIRONMENT
from ...db import Database
from ..dependencies import get_database

router = APIRouter(tags=["health"])

@router.get("/")
async def health_check(database: Database = Depends(get_database)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": "production" if IS_PRODUCTION_ENVIRONMENT else "development",
        "database": "connected" if database.is_connected else "disconnected",
        "version": __version__
    }
