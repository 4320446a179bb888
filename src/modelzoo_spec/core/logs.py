# src/modelzoo_spec/core/logs.py
import os
import sys
from typing import Optional

from loguru import logger

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Route loguru output according to the settings.

    Replaces every existing sink with a stderr sink at ``LOG_LEVEL`` and, when
    ``LOG_FILE`` is set, a rotating file sink next to it.
    """
    settings = settings or get_settings()
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    if settings.LOG_FILE:
        log_path = os.path.abspath(settings.LOG_FILE)
        os.makedirs(os.path.dirname(log_path), exist_ok=True)
        logger.add(
            log_path,
            level=settings.LOG_LEVEL,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
        )
        logger.debug("Logging to {}", log_path)
