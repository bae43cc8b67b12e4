import logging
import os
import re
import sys
from contextvars import ContextVar, Token
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s'
NO_REQUEST = '-'

_request_id: ContextVar[str] = ContextVar('request_id', default=NO_REQUEST)


def bind_request_id(request_id: str) -> Token:
    """Tag every record logged in the current context with ``request_id``."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def current_request_id() -> str:
    return _request_id.get()


class RequestContextFilter(logging.Filter):
    """Adds the bound request id to each record as ``request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'request_id'):
            record.request_id = _request_id.get()
        return True


class SensitiveDataFilter(logging.Filter):
    """
    Masks credentials and payloads: passwords, session tokens (bare, in an
    ``X-Token`` header or as an ``auth_`` store key), Basic credentials and
    base64 upload bodies.

    ``basic`` runs before ``authorization`` so the scheme word is not taken
    for the credential.
    """

    PATTERNS = [
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)([^"\'}\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(x-token["\']?\s*[:=]\s*["\']?)([^"\'}\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(token["\']?\s*[:=]\s*["\']?)([^"\'}\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(basic\s+)([^\s,}\'\"]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(authorization["\']?\s*[:=]\s*["\']?)([^"\'}\s,]+)', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(auth_)([0-9a-f-]{8,})', re.IGNORECASE), r'\1***MASKED***'),
        (re.compile(r'(["\']?data["\']?\s*[:=]\s*["\']?)([A-Za-z0-9+/=]{16,})', re.IGNORECASE), r'\1***MASKED***'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._mask(record.msg)

        if isinstance(record.args, dict):
            record.args = {k: self._mask(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self._mask(arg) for arg in record.args)

        return True

    def _mask(self, value):
        if not isinstance(value, str):
            return value
        for pattern, replacement in self.PATTERNS:
            value = pattern.sub(replacement, value)
        return value


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Records are written to stdout, tagged with the request id bound via
    ``bind_request_id`` (``-`` outside a request) and passed through
    ``SensitiveDataFilter``. Calling it again for the same component only
    updates the logger level.

    Args:
        component_name: Name of the component (e.g., 'files_manager')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    handler.addFilter(RequestContextFilter())
    handler.addFilter(SensitiveDataFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name (typically ``__name__``). Loggers under
    a component configured by ``setup_logging`` share its handler.
    """
    return logging.getLogger(name)
