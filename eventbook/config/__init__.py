"""Configuration package."""

from .environment import IS_PRODUCTION_ENVIRONMENT, get_database_url

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'get_database_url']
