"""Product service for the Shopify admin API."""

from ..types import Product, ProductResource, ProductsResource
from .base import ResourceService
from .metafields import MetafieldsMixin


class ProductService(MetafieldsMixin, ResourceService[Product]):
    """Service for the products endpoints.

    See: https://shopify.dev/docs/api/admin-rest/latest/resources/product
    """

    base_path = "admin/products"
    resource_name = "products"
    resource_model = ProductResource
    collection_model = ProductsResource
