"""Observability configuration with Pydantic Logfire."""

import logging

from src.config import settings

logger = logging.getLogger(__name__)


def setup_logfire() -> bool:
    """Configure Logfire for observability.

    Only activates if LOGFIRE_TOKEN environment variable is set.
    Call this at startup before running any demo.

    Returns:
        True if Logfire was configured, False otherwise.
    """
    if not settings.logfire_token:
        return False

    try:
        import logfire

        logfire.configure(
            token=settings.logfire_token, send_to_logfire="if-token-present"
        )
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())
    except Exception as e:
        # Log but don't fail - observability is optional
        logger.warning("Failed to configure Logfire: %s", str(e))
        return False

    return True
