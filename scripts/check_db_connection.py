#!/usr/bin/env python3
"""Check that DATABASE_URL points at a reachable database."""

import asyncio
import logging
import sys

from eventbook.db import Database, DatabaseConfig, DatabaseError
from eventbook.errors import ConfigurationError

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

async def check_connection() -> bool:
    try:
        config = DatabaseConfig.from_env(create_tables=False)
    except ConfigurationError as e:
        logger.error(str(e))
        return False

    logger.info("DATABASE_URL is set")
    database = Database(config)
    try:
        await database.connect()
        logger.info("Successfully connected to database")
        return True
    except DatabaseError as e:
        logger.error(f"Failed to connect to database: {e}")
        return False
    finally:
        await database.dispose()

if __name__ == "__main__":
    success = asyncio.run(check_connection())
    sys.exit(0 if success else 1)
