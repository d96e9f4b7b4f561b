"""Environment configuration module.

This module MUST be imported before any other project modules that depend on environment variables.
It loads the .env file and exposes the settings used by both the FastAPI app and the helper scripts.

Usage:
    from eventbook.config.environment import IS_PRODUCTION_ENVIRONMENT, get_database_url

Note:
    This module handles loading of environment variables via python-dotenv.
    In production, environment variables should be set directly in the
    platform's environment configuration.
"""

import os
import logging
from dotenv import load_dotenv

from ..errors import ConfigurationError

# Load environment variables - this must happen before any other imports
load_dotenv()

DATABASE_URL_ENV = 'DATABASE_URL'

# Environment configuration
env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )


def get_database_url() -> str:
    """
    Return the database connection string.

    Read on every call so tests and scripts can set the variable after import.

    Raises:
        ConfigurationError: If DATABASE_URL is unset or blank
    """
    url = os.environ.get(DATABASE_URL_ENV, '').strip()
    if not url:
        raise ConfigurationError(f"Missing env var: {DATABASE_URL_ENV}")
    return url


def get_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean flag such as DATABASE_ECHO."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'DATABASE_URL_ENV', 'get_database_url', 'get_bool_env']
