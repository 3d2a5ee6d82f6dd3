"""Generic CRUD plumbing shared by every REST resource."""

from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..shared import QueryOptions, dump_payload

if TYPE_CHECKING:
    from ..client import ShopifyClient


ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceService(Generic[ModelT]):
    """CRUD operations for one remote collection.

    Subclasses set ``base_path`` plus the single and collection envelope
    models. The envelope keys (``"product"`` / ``"products"``) are taken from
    the envelope models' only field.
    """

    base_path: str = ""
    resource_model: Type[BaseModel]
    collection_model: Type[BaseModel]

    def __init__(self, client: "ShopifyClient"):
        self.client = client

    @property
    def resource_key(self) -> str:
        return next(iter(self.resource_model.model_fields))

    @property
    def collection_key(self) -> str:
        return next(iter(self.collection_model.model_fields))

    def _collection_path(self, suffix: str = "") -> str:
        return f"{self.base_path}{suffix}.json"

    def _item_path(self, resource_id: Any) -> str:
        return f"{self.base_path}/{resource_id}.json"

    def _wrap(self, entity: ModelT) -> Dict[str, Any]:
        return dump_payload(self.resource_model(**{self.resource_key: entity}))

    def _unwrap_one(self, data: Dict[str, Any]) -> Optional[ModelT]:
        return getattr(self.resource_model.model_validate(data), self.resource_key)

    def _unwrap_many(self, data: Dict[str, Any]) -> List[ModelT]:
        return getattr(self.collection_model.model_validate(data), self.collection_key)

    async def list(self, options: QueryOptions = None) -> List[ModelT]:
        """List resources, passing ``options`` through as the query string."""
        data = await self.client.get(self._collection_path(), options)
        return self._unwrap_many(data)

    async def count(self, options: QueryOptions = None) -> int:
        """Count resources."""
        return await self.client.count(self._collection_path("/count"), options)

    async def get(self, resource_id: int, options: QueryOptions = None) -> Optional[ModelT]:
        """Get a single resource by id."""
        data = await self.client.get(self._item_path(resource_id), options)
        return self._unwrap_one(data)

    async def create(self, entity: ModelT) -> Optional[ModelT]:
        """Create a resource. The server assigns id and computed fields."""
        data = await self.client.post(self._collection_path(), self._wrap(entity))
        return self._unwrap_one(data)

    async def update(self, entity: ModelT) -> Optional[ModelT]:
        """Update an existing resource.

        The caller must set ``entity.id``; an entity without one is sent to
        ``<collection>/0.json`` as-is.
        """
        path = self._item_path(getattr(entity, "id", None) or 0)
        data = await self.client.put(path, self._wrap(entity))
        return self._unwrap_one(data)

    async def delete(self, resource_id: int) -> None:
        """Delete a resource by id."""
        await self.client.delete(self._item_path(resource_id))
