"""Customer service for the Shopify admin API."""

from typing import List

from ..shared import QueryOptions
from ..types import Customer, CustomerResource, CustomersResource
from .base import ResourceService
from .metafields import MetafieldsMixin


class CustomerService(MetafieldsMixin, ResourceService[Customer]):
    """Service for the customers endpoints.

    See: https://shopify.dev/docs/api/admin-rest/latest/resources/customer
    """

    base_path = "admin/customers"
    resource_name = "customers"
    resource_model = CustomerResource
    collection_model = CustomersResource

    async def search(self, options: QueryOptions = None) -> List[Customer]:
        """Search customers via the query language of customers/search.json.

        Takes a ``CustomerSearchOptions`` or mapping, e.g. ``{"query": "email:bob@example.com"}``.
        """
        data = await self.client.get(self._collection_path("/search"), options)
        return self._unwrap_many(data)
