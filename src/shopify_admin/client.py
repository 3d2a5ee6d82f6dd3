"""Shopify Admin API client."""

from typing import Any, Dict, Optional

import httpx

from .config import Settings
from .services import CustomerService, MetafieldService, ProductService
from .shared import (
    ConfigurationError,
    LoggerMixin,
    NotFoundError,
    QueryOptions,
    RateLimitError,
    ShopifyAPIError,
    build_query_params,
)
from .types import CountResource


DEFAULT_API_VERSION = "2024-01"


class ShopifyClient(LoggerMixin):
    """Client for interacting with the Shopify Admin REST API.

    Paths handed to the request primitives are relative to the store, e.g.
    ``admin/products.json``. When ``api_version`` is set the ``admin/`` prefix
    is expanded to ``admin/api/<version>/``.
    """

    def __init__(
        self,
        store_url: str,
        access_token: str,
        api_version: Optional[str] = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not store_url:
            raise ConfigurationError("store_url", "store URL must not be empty")
        if not access_token:
            raise ConfigurationError("access_token", "access token must not be empty")

        self.store_url = store_url.rstrip("/")
        if not self.store_url.startswith(("https://", "http://")):
            self.store_url = f"https://{self.store_url}"
        self.api_version = api_version

        self.client = httpx.AsyncClient(
            headers={
                "X-Shopify-Access-Token": access_token,
                "Content-Type": "application/json",
                "Accept": "application/json"
            },
            timeout=timeout,
            follow_redirects=False,
            transport=transport
        )

        self.products = ProductService(self)
        self.customers = CustomerService(self)
        # Shop-level metafields
        self.metafields = MetafieldService(self)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "ShopifyClient":
        """Create a client from application settings."""
        return cls(
            store_url=settings.shopify_base_url,
            access_token=settings.shopify_access_token,
            api_version=settings.shopify_api_version or None,
            timeout=settings.shopify_timeout,
            transport=transport
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "ShopifyClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def build_url(self, path: str) -> str:
        """Resolve a relative resource path against the store."""
        path = path.lstrip("/")
        if (
            self.api_version
            and path.startswith("admin/")
            and not path.startswith("admin/api/")
        ):
            path = f"admin/api/{self.api_version}/{path[len('admin/'):]}"
        return f"{self.store_url}/{path}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None
    ) -> Optional[Any]:
        """Make an API request with error handling."""
        url = self.build_url(path)

        self.log_event(
            "shopify_request",
            level="debug",
            method=method,
            path=path,
            params=params
        )

        try:
            response = await self.client.request(
                method=method,
                url=url,
                params=params,
                json=json_data
            )
        except httpx.RequestError as e:
            self.log_error(e, "shopify_request_failed", method=method, path=path)
            raise ShopifyAPIError(
                message=f"Request failed: {str(e)}",
                status_code=None
            ) from e

        if not response.is_success:
            self.log_event(
                "shopify_request_failed",
                level="error",
                method=method,
                path=path,
                status_code=response.status_code
            )
            body = self._error_body(response)

            if response.status_code == 429:
                raise RateLimitError(
                    resource=path,
                    retry_after=self._retry_after(response),
                    response=body
                )

            if response.status_code == 404:
                raise NotFoundError(path, response=body)

            # Redirects are not followed; a moved store must be reconfigured.
            if response.is_redirect:
                raise ShopifyAPIError(
                    message=f"Unexpected redirect to {response.headers.get('Location')}",
                    status_code=response.status_code,
                    response=body
                )

            raise ShopifyAPIError(
                message=f"API request failed: {response.text}",
                status_code=response.status_code,
                response=body
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ShopifyAPIError(
                message=f"Invalid JSON in response from {path}",
                status_code=response.status_code,
                response=response.text
            ) from e

    @staticmethod
    def _error_body(response: httpx.Response) -> Optional[Any]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _retry_after(response: httpx.Response) -> Optional[float]:
        value = response.headers.get("Retry-After")
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            return None

    async def get(self, path: str, options: QueryOptions = None) -> Dict[str, Any]:
        """GET a resource, returning the decoded JSON body."""
        data = await self._request("GET", path, params=build_query_params(options))
        return data or {}

    async def post(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON body, returning the decoded JSON response."""
        response = await self._request("POST", path, json_data=data)
        return response or {}

    async def put(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """PUT a JSON body, returning the decoded JSON response."""
        response = await self._request("PUT", path, json_data=data)
        return response or {}

    async def delete(self, path: str) -> None:
        """DELETE a resource. Any response body is ignored."""
        await self._request("DELETE", path)

    async def count(self, path: str, options: QueryOptions = None) -> int:
        """GET a count endpoint and return the bare count."""
        data = await self.get(path, options)
        return CountResource.model_validate(data).count
