"""Resource services for the Shopify admin API."""

from .base import ResourceService
from .metafields import MetafieldService, MetafieldsMixin
from .products import ProductService
from .customers import CustomerService

__all__ = [
    "ResourceService",
    "MetafieldService",
    "MetafieldsMixin",
    "ProductService",
    "CustomerService",
]
