"""
Logging Package
JSON logs with sensitive-data redaction, routed by logger name

Use sovest.logging.getLogger instead of logging.getLogger so bare names that
were never configured do not silently create unhandled loggers.
"""
import logging
from typing import List, Optional

from sovest.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
]


def _configured_names() -> List[str]:
    from sovest.support import Config
    handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}
    return [cfg['name'] for cfg in handlers.values() if cfg.get('name')]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger

    Dotted names ('sovest.routing.route_loader', 'sanic.error') are returned
    as-is and inherit handlers from their configured parent. A bare name must
    appear in app.ALLOWED_LOGGING_HANDLERS; anything else maps to the root logger.

    Example:
        logger = getLogger(__name__)
        logger.info("Route table built", extra={'route_count': 42})
    """
    if name and '.' not in name and name not in _configured_names():
        name = None
    return logging.getLogger(name)
