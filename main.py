"""Main application entry point."""

from eventbook.config.environment import IS_PRODUCTION_ENVIRONMENT
from eventbook.api import create_application

# Fails here, before any connection attempt, if DATABASE_URL is missing
app = create_application()

if __name__ == "__main__":
    import uvicorn
    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - hot-reload restarts the process, so a fresh Database is built each time
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=8000,
            reload=True,
            log_level="debug"
        )
    else:
        # Production mode - each worker process owns its own Database
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=8000,
            reload=False,
            workers=4,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
