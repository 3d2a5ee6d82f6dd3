"""Shared module for common utilities and exceptions."""

from .exceptions import (
    ShopifyClientException,
    ShopifyAPIError,
    NotFoundError,
    RateLimitError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    get_logger,
    LoggerMixin,
    ShopifyLogHandler,
    redact_sensitive,
)

from .utils import (
    QueryOptions,
    encode_query_value,
    build_query_params,
    dump_payload,
)

__all__ = [
    # Exceptions
    "ShopifyClientException",
    "ShopifyAPIError",
    "NotFoundError",
    "RateLimitError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "ShopifyLogHandler",
    "redact_sensitive",
    # Utils
    "QueryOptions",
    "encode_query_value",
    "build_query_params",
    "dump_payload",
]
