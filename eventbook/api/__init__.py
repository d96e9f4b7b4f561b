"""HTTP surface for event and booking records."""

from .app import create_application

__all__ = ['create_application']
