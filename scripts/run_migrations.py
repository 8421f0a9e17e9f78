#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from wire.config import Settings
from wire.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
