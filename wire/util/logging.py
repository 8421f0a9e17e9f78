"""Logging configuration for the application."""

import logging
import sys

from wire.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Debug output is enabled by the DEBUG flag only; production and staging
    run at INFO like development.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Outbound calls to Google and the database driver are noisy at INFO
    for noisy in ("httpx", "httpcore", "asyncpg"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("wire").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
