"""
Logging Configuration and Utilities

Console (text or JSON) and optional rotating-file logging, request id
propagation through a context variable, and an adapter that redacts
secrets from structured extras.
"""

import sys
import logging
import logging.handlers
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from lapordesa.config.settings import Settings

# Context variable for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

SENSITIVE_KEYS = ('password', 'token', 'secret', 'authorization', 'credentials')

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'


class RequestContextFilter(logging.Filter):
    """Stamp every record with the current request id"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id.get() or '-'
        return True


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


def _sanitize(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mask sensitive values in log extras"""
    clean = {}
    for key, value in data.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            clean[key] = '[REDACTED]'
        elif isinstance(value, dict):
            clean[key] = _sanitize(value)
        else:
            clean[key] = value
    return clean


class LoggerAdapter:
    """Logger wrapper that redacts sensitive keys from ``extra``"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _log(self, level: int, message: str, *args, **kwargs):
        if kwargs.get('extra'):
            kwargs['extra'] = _sanitize(kwargs['extra'])
        kwargs.setdefault('stacklevel', 3)

        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        self._log(logging.CRITICAL, message, *args, **kwargs)


def get_logger(name: str) -> LoggerAdapter:
    """
    Get configured logger instance.

    Args:
        name: Logger name, usually the caller's ``__name__``

    Returns:
        Enhanced logger adapter
    """
    return LoggerAdapter(logging.getLogger(name))


def _configure_library_loggers(settings: Settings) -> None:
    """Reduce noise from external libraries"""
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("cloudinary").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

    if settings.DATABASE_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def setup_logging(settings: Settings) -> None:
    """Initialize logging configuration"""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL))

    for handler in list(root_logger.handlers):
        if getattr(handler, '_lapordesa', False):
            root_logger.removeHandler(handler)

    if settings.LOG_FORMAT == "json":
        formatter = CustomJsonFormatter('%(asctime)s %(name)s %(levelname)s %(request_id)s %(message)s')
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        ))

    for handler in handlers:
        handler.setLevel(getattr(logging, settings.LOG_LEVEL))
        handler.setFormatter(formatter)
        handler.addFilter(RequestContextFilter())
        handler._lapordesa = True
        root_logger.addHandler(handler)

    _configure_library_loggers(settings)

    get_logger(__name__).info(
        "Logging system initialized",
        extra={'log_level': settings.LOG_LEVEL, 'log_format': settings.LOG_FORMAT},
    )


__all__ = [
    'get_logger',
    'setup_logging',
    'LoggerAdapter',
    'RequestContextFilter',
    'request_id',
]
