"""Metafield operations, standalone or nested under a parent resource."""

from typing import TYPE_CHECKING, List, Optional

from ..shared import QueryOptions
from ..types import Metafield, MetafieldResource, MetafieldsResource
from .base import ResourceService

if TYPE_CHECKING:
    from ..client import ShopifyClient


class MetafieldService(ResourceService[Metafield]):
    """CRUD for the metafields of one owner.

    With no ``resource`` the service addresses shop-level metafields at
    ``admin/metafields``; otherwise ``admin/<resource>/<resource_id>/metafields``.
    """

    resource_model = MetafieldResource
    collection_model = MetafieldsResource

    def __init__(
        self,
        client: "ShopifyClient",
        resource: str = "",
        resource_id: Optional[int] = None
    ):
        super().__init__(client)
        self.resource = resource
        self.resource_id = resource_id
        if resource:
            self.base_path = f"admin/{resource}/{resource_id}/metafields"
        else:
            self.base_path = "admin/metafields"


class MetafieldsMixin:
    """Adds ``*_metafield(s)`` operations to a resource service.

    Requires ``client`` and ``resource_name`` on the host class.
    """

    resource_name: str = ""

    def metafields(self, resource_id: int) -> MetafieldService:
        """Metafield service scoped to one instance of this resource."""
        return MetafieldService(self.client, self.resource_name, resource_id)

    async def list_metafields(
        self,
        resource_id: int,
        options: QueryOptions = None
    ) -> List[Metafield]:
        return await self.metafields(resource_id).list(options)

    async def count_metafields(self, resource_id: int, options: QueryOptions = None) -> int:
        return await self.metafields(resource_id).count(options)

    async def get_metafield(
        self,
        resource_id: int,
        metafield_id: int,
        options: QueryOptions = None
    ) -> Optional[Metafield]:
        return await self.metafields(resource_id).get(metafield_id, options)

    async def create_metafield(self, resource_id: int, metafield: Metafield) -> Optional[Metafield]:
        return await self.metafields(resource_id).create(metafield)

    async def update_metafield(self, resource_id: int, metafield: Metafield) -> Optional[Metafield]:
        return await self.metafields(resource_id).update(metafield)

    async def delete_metafield(self, resource_id: int, metafield_id: int) -> None:
        await self.metafields(resource_id).delete(metafield_id)
