#!/usr/bin/env python3
"""Start the API under uvicorn with logging and Logfire configured first."""

import sys

import logfire
import uvicorn

from wire.config import Settings
from wire.util.logging import setup_logging
from wire.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app import so startup errors are captured
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting RazeWire accounts API", port=settings.port)
        uvicorn.run(
            "wire.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
