"""Structured logging for the Shopify admin client.

The client only emits events through structlog. Applications that want them
rendered call ``setup_logging`` once at startup; calling it again replaces the
handler it installed instead of stacking another one.
"""

import logging
import sys
from typing import Any, Dict, Mapping

import structlog


SENSITIVE_KEYS = frozenset({
    "x-shopify-access-token",
    "access_token",
    "shopify_access_token",
    "authorization",
})

REDACTED = "***"


class ShopifyLogHandler(logging.StreamHandler):
    """Stream handler installed by ``setup_logging``."""


def _redact(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item) for item in value)
    return value


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """structlog processor masking access tokens, including inside header maps."""
    return _redact(event_dict)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True
) -> None:
    """Route structlog events through stdlib logging to stdout."""

    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_sensitive,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = ShopifyLogHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if isinstance(existing, ShopifyLogHandler):
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper()))


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Gives a class a structlog logger named after it."""

    @property
    def logger(self) -> structlog.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_event(self, event: str, level: str = "info", **kwargs: Any) -> None:
        getattr(self.logger, level)(event, **kwargs)

    def log_error(self, error: Exception, event: str = "error_occurred", **kwargs: Any) -> None:
        self.logger.error(
            event,
            error_type=type(error).__name__,
            error_message=str(error),
            **kwargs
        )
