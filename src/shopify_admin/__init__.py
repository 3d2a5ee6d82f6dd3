"""Typed async client for the Shopify Admin REST API."""

from .client import ShopifyClient, DEFAULT_API_VERSION
from .config import Settings, get_settings
from .services import (
    ResourceService,
    MetafieldService,
    ProductService,
    CustomerService,
)
from .shared import (
    ShopifyClientException,
    ShopifyAPIError,
    NotFoundError,
    RateLimitError,
    ConfigurationError,
    setup_logging,
    get_logger,
)
from .types import (
    Metafield,
    Product,
    ProductOption,
    Variant,
    Image,
    Customer,
    CustomerAddress,
    ProductResource,
    ProductsResource,
    CustomerResource,
    CustomersResource,
    MetafieldResource,
    MetafieldsResource,
    CountResource,
    ListOptions,
    CountOptions,
    CustomerSearchOptions,
)

__version__ = "1.0.0"

__all__ = [
    # Client
    "ShopifyClient",
    "DEFAULT_API_VERSION",
    "Settings",
    "get_settings",
    # Services
    "ResourceService",
    "MetafieldService",
    "ProductService",
    "CustomerService",
    # Exceptions
    "ShopifyClientException",
    "ShopifyAPIError",
    "NotFoundError",
    "RateLimitError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "get_logger",
    # Types
    "Metafield",
    "Product",
    "ProductOption",
    "Variant",
    "Image",
    "Customer",
    "CustomerAddress",
    "ProductResource",
    "ProductsResource",
    "CustomerResource",
    "CustomersResource",
    "MetafieldResource",
    "MetafieldsResource",
    "CountResource",
    "ListOptions",
    "CountOptions",
    "CustomerSearchOptions",
]
