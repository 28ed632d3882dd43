"""Logging setup for the API process."""
import logging
import sys

from ministry_fit.core.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> logging.Logger:
    """Configure root handlers once and return the ``app`` logger."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)
    app_logger = logging.getLogger("app")
    app_logger.setLevel(level)
    # uvicorn's access log duplicates request lines outside development
    if not settings.is_development:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return app_logger
