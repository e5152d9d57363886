"""
Logging Configuration
Rotating JSON log files with sensitive-data redaction
"""
import logging
import logging.handlers
import json
import re
from typing import Dict, Optional
from datetime import datetime


class SensitiveDataFilter(logging.Filter):
    """
    Redacts credentials from log messages and their %-args

    Route parameters and query strings end up in log lines (debug endpoint
    requests, CLI invocations), so password/token values are masked before
    any handler writes them.
    """

    # JSON field patterns, redacted as "[REDACTED]"
    JSON_FIELD_PATTERNS = {
        'password': r'("password"\s*:\s*)"[^"]*"',
        'password_confirmation': r'("password_confirmation"\s*:\s*)"[^"]*"',
        'api_key': r'("api_key"\s*:\s*)"[^"]*"',
        'token': r'("token"\s*:\s*)"[^"]*"',
        'access_token': r'("access_token"\s*:\s*)"[^"]*"',
        'secret': r'("secret"\s*:\s*)"[^"]*"',
    }

    # Query-string and header patterns, value redacted after the captured prefix
    PREFIX_PATTERNS = {
        'query_secret': r'((?:password|token|api_key|secret)=)[^&\s]*',
        'auth_header': r'(Authorization:\s+Bearer\s+)[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*',
    }

    def __init__(self, additional_patterns: Optional[Dict[str, str]] = None):
        """
        Args:
            additional_patterns: Extra prefix-capturing regexes (name: pattern);
                group 1 is kept and the rest of the match becomes [REDACTED]
        """
        super().__init__()
        prefix_patterns = {**self.PREFIX_PATTERNS, **(additional_patterns or {})}

        self.json_patterns = [re.compile(p, re.IGNORECASE) for p in self.JSON_FIELD_PATTERNS.values()]
        self.prefix_patterns = [re.compile(p, re.IGNORECASE) for p in prefix_patterns.values()]

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if isinstance(record.args, dict):
            record.args = {k: self._redact_value(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self._redact_value(arg) for arg in record.args)

        # Never drops the record, only rewrites it
        return True

    def redact(self, text: str) -> str:
        for pattern in self.json_patterns:
            text = pattern.sub(r'\1"[REDACTED]"', text)
        for pattern in self.prefix_patterns:
            text = pattern.sub(r'\1[REDACTED]', text)
        return text

    def _redact_value(self, value):
        return self.redact(value) if isinstance(value, str) else value


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line

    Standard LogRecord attributes are mapped to a fixed set of keys; anything
    passed through extra={...} is copied in under its own name.
    """

    STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        entry.update(
            (key, value) for key, value in record.__dict__.items()
            if key not in self.STANDARD_ATTRS
        )

        return json.dumps(entry, default=str)


class LoggerConfig:
    """
    Builds the named loggers listed in app.ALLOWED_LOGGING_HANDLERS
    """

    LEVELS_BY_ENVIRONMENT = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'testing': logging.ERROR,
    }

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
        filter_sensitive: bool = True,
        additional_sensitive_patterns: Optional[Dict[str, str]] = None,
        file_name: Optional[str] = None
    ) -> logging.Logger:
        """
        (Re)configure a logger to write to storage/logs/<file_name>.log

        Existing handlers are closed and replaced, so calling this again
        (a second create_app in the same process) does not duplicate output.
        A console handler is added when APP_DEBUG is on.

        Example:
            logger = LoggerConfig.setup_logger('sovest.routing', file_name='routing')
        """
        from sovest.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        from sovest.support import Config, Storage

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(Config.get('app.APP_ENV', 'local')))

        for existing in list(logger.handlers):
            logger.removeHandler(existing)
            existing.close()

        log_file = Storage.logs(f"{file_name or name or 'root'}.log")
        Storage.ensure_directory(log_file.parent)

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        handlers = [
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes or DEFAULT_LOG_MAX_BYTES,
                backupCount=backup_count if backup_count is not None else DEFAULT_LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
        ]
        if Config.get('app.APP_DEBUG', False):
            handlers.append(logging.StreamHandler())

        sensitive_filter = SensitiveDataFilter(additional_sensitive_patterns) if filter_sensitive else None
        for handler in handlers:
            handler.setFormatter(formatter)
            if sensitive_filter is not None:
                handler.addFilter(sensitive_filter)
            logger.addHandler(handler)

        # Handled here; keep records out of the root logger
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """Log level for an APP_ENV value; INFO for anything unlisted"""
        return LoggerConfig.LEVELS_BY_ENVIRONMENT.get((environment or '').lower(), logging.INFO)
