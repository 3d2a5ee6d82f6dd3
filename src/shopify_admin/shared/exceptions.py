"""Custom exceptions for the Shopify admin client."""

from typing import Optional, Dict, Any


class ShopifyClientException(Exception):
    """Base exception for all Shopify admin client errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ShopifyAPIError(ShopifyClientException):
    """Raised when a Shopify API call fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        error_code: str = "SHOPIFY_API_ERROR"
    ):
        super().__init__(
            message=f"Shopify API error: {message}",
            error_code=error_code,
            details={"status_code": status_code, "response": response}
        )
        self.status_code = status_code
        self.response = response


class NotFoundError(ShopifyAPIError):
    """Raised when the requested resource does not exist."""

    def __init__(self, path: str, response: Optional[Any] = None):
        super().__init__(
            message=f"Not found: {path}",
            status_code=404,
            response=response,
            error_code="NOT_FOUND"
        )
        self.path = path


class RateLimitError(ShopifyAPIError):
    """Raised when the API rate limit is exceeded."""

    def __init__(
        self,
        resource: str,
        retry_after: Optional[float] = None,
        response: Optional[Any] = None
    ):
        message = f"Rate limit exceeded for {resource}"
        if retry_after:
            message += f". Retry after {retry_after} seconds"

        super().__init__(
            message=message,
            status_code=429,
            response=response,
            error_code="RATE_LIMIT_EXCEEDED"
        )
        self.resource = resource
        self.retry_after = retry_after


class ConfigurationError(ShopifyClientException):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        config_key: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            error_code="CONFIGURATION_ERROR",
            details={"config_key": config_key, **(details or {})}
        )
        self.config_key = config_key
