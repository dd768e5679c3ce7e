"""
Logging configuration for the Moza backend.

Configures a console logger for the service and keeps the SQLAlchemy
engine logger quiet unless DB_ECHO is enabled.
"""

import logging
import sys
from typing import Optional

from moza_backend.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_LOGGER = "moza_backend"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the service logger.

    Safe to call more than once: existing handlers are replaced.
    """
    log_level = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logger = logging.getLogger(SERVICE_LOGGER)
    logger.setLevel(numeric_level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    engine_level = logging.INFO if settings.DB_ECHO else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the service namespace.
    """
    if not name.startswith(SERVICE_LOGGER):
        name = f"{SERVICE_LOGGER}.{name}"
    return logging.getLogger(name)
