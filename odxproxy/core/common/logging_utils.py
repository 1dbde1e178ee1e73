"""
Logging utilities for the ODX proxy client.

This module provides utilities for logging, including:
- Redaction of API keys and credentials
- Test/production environment tagging
- structlog loggers that render through the standard library
"""

import logging
import os
import re
import sys
from collections.abc import Iterable
from typing import Any, Literal

import structlog


# Environment detection
def _is_running_under_pytest() -> bool:
    """Detect if we're running under pytest.

    Returns:
        True if running under pytest, False otherwise
    """
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Get the environment tag for logging.

    Returns:
        'test' if running under pytest, 'prod' otherwise
    """
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        if fmt is None:
            fmt = DEFAULT_LOG_FORMAT
        super().__init__(fmt, datefmt, style=style)

    def format(self, record: logging.LogRecord) -> str:
        # Records emitted before the filter is installed lack the tag
        if not hasattr(record, "env_tag"):
            record.env_tag = _get_environment_tag()
        return super().format(record)


DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)

# `apikey: <value>` / `apikey=<value>` as it appears in header dumps
APIKEY_HEADER_PATTERN = re.compile(r"(apikey['\"]?\s*[:=]\s*['\"]?)([^\s'\",}]+)", re.I)
BEARER_TOKEN_PATTERN = re.compile(r"Bearer\s+([a-zA-Z0-9._~+/-]+=*)")


def _structlog_processors() -> list[Any]:
    # Rendered to a plain string so stdlib filters and formatters apply
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.format_exc_info,
        structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
    ]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Level, handlers and redaction are whatever the standard library is
    configured with, so a library user who never calls
    ``configure_logging`` sees nothing below WARNING.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        processors=_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value.

    Args:
        value: The value to redact
        mask: The mask to use

    Returns:
        The redacted value
    """
    if not value:
        return value

    # Keep the first and last two characters of long secrets
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    return mask


class ApiKeyRedactionFilter(logging.Filter):
    """Logging filter that redacts known API keys from log records.

    This filter will sanitize `record.msg` and `record.args` (if they are
    strings or containers of strings) replacing any discovered API key
    occurrences with a mask.
    """

    def __init__(self, api_keys: Iterable[str] | None = None, mask: str = "***") -> None:
        super().__init__()
        self.mask = mask
        keys = {k for k in (api_keys or []) if k}
        self.key_pattern: re.Pattern | None = None
        if keys:
            # Longer keys first so a key containing another is fully masked
            escaped = sorted((re.escape(k) for k in keys), key=len, reverse=True)
            self.key_pattern = re.compile("|".join(escaped))

    def _sanitize(self, obj: object) -> object:
        """Recursively sanitize strings inside common containers."""
        if isinstance(obj, str):
            s = obj
            if self.key_pattern is not None:
                s = self.key_pattern.sub(self.mask, s)
            s = APIKEY_HEADER_PATTERN.sub(lambda m: f"{m.group(1)}{self.mask}", s)
            return BEARER_TOKEN_PATTERN.sub(f"Bearer {self.mask}", s)
        if isinstance(obj, dict):
            return {k: self._sanitize(v) for k, v in obj.items()}
        if isinstance(obj, list | tuple):
            sanitized = [self._sanitize(v) for v in obj]
            return type(obj)(sanitized)
        return obj

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        try:
            if isinstance(record.msg, str):
                record.msg = self._sanitize(record.msg)  # type: ignore[assignment]

            if record.args:
                if isinstance(record.args, dict):
                    record.args = self._sanitize(record.args)  # type: ignore[assignment]
                elif isinstance(record.args, tuple):
                    record.args = tuple(self._sanitize(a) for a in record.args)

            for attr in ("exc_text", "stack_info"):
                val = getattr(record, attr, None)
                if isinstance(val, str):
                    setattr(record, attr, self._sanitize(val))
        except Exception:
            # Never let logging filtering raise
            return True
        return True


def install_api_key_redaction_filter(
    api_keys: Iterable[str] | None, mask: str = "***"
) -> ApiKeyRedactionFilter:
    """Install the API key redaction filter on the root logger and its handlers.

    Safe to call multiple times; each call adds a filter instance which
    redacts the provided API keys from log records.
    """
    root = logging.getLogger()
    filter_instance = ApiKeyRedactionFilter(api_keys, mask=mask)
    root.addFilter(filter_instance)
    # Root logger filters do not run for records propagated from child loggers
    for handler in list(root.handlers):
        handler.addFilter(filter_instance)
    return filter_instance


def configure_logging(
    level: int = logging.INFO,
    log_format: str | None = None,
    log_file: str | None = None,
    api_keys: Iterable[str] | None = None,
) -> None:
    """Configure stdlib logging for applications embedding the client.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
        api_keys: Keys to mask in every emitted record
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    env_filter = EnvironmentTaggingFilter()
    for handler in handlers:
        handler.addFilter(env_filter)

    install_api_key_redaction_filter(api_keys)
