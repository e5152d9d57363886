"""
Logging Service Provider
Initializes application-wide structured logging
"""
import logging
from sovest.service_provider import ServiceProvider
from sovest.logging.logger_config import LoggerConfig
from sovest.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    SANIC_LOGGERS = ['sanic.root', 'sanic.error', 'sanic.access', 'sanic.server']

    def register(self):
        """Register logging services"""
        self.setup_application_logger()

    def setup_application_logger(self):
        """
        Setup every logger listed in app.ALLOWED_LOGGING_HANDLERS
        """
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {})

        for handler_config in allowed_handlers.values():
            LoggerConfig.setup_logger(
                name=handler_config.get('name'),
                filter_sensitive=handler_config.get('filter_sensitive', True),
                file_name=handler_config.get('file_name')
            )

        # Keep Sanic's console output out of our root logger
        for logger_name in self.SANIC_LOGGERS:
            logging.getLogger(logger_name).propagate = False
