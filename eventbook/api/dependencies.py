"""FastAPI dependencies."""

from fastapi import Request

from ..db import Database

def get_database(request: Request) -> Database:
    """The Database owned by the application, created in create_application()."""
    return request.app.state.database
