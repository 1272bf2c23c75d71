"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire

from shopcart import __version__
from shopcart.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire with the instrumentation this client needs.

    Must be called ONCE at startup, before the database connection is opened.

    This function configures Logfire cloud tracking and instruments:
    - PyMongo (every command sent to MongoDB)
    - Python logging (bridges to Logfire)

    Args:
        settings: Application settings containing Logfire token

    Returns:
        True when Logfire was configured. Failures only log a warning.
    """
    if not settings.logfire_token:
        logger.debug("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="shopcart",
            service_version=__version__,
        )

        # Bridge Python logging to Logfire
        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        # Needs the opentelemetry pymongo instrumentation package
        try:
            logfire.instrument_pymongo()
        except Exception as instrument_error:
            logger.debug(f"PyMongo instrumentation skipped: {instrument_error}")

        logger.info("✓ Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
