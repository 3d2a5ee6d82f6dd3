"""Shared fixtures: a fake Shopify store behind httpx.MockTransport."""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from shopify_admin import ShopifyClient


Handler = Callable[[httpx.Request], httpx.Response]


class FakeShopify:
    """Records every request and answers from canned routes.

    Routes are keyed by (method, url path). Unknown routes answer 404 the way
    Shopify does.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Union[Handler, Dict[str, Any]]] = {}

    def add(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.routes[(method, path)] = {
            "json": json,
            "status_code": status_code,
            "headers": headers,
        }

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))

        if route is None:
            return httpx.Response(404, json={"errors": "Not Found"})
        if callable(route):
            return route(request)
        if route["json"] is None:
            return httpx.Response(route["status_code"], headers=route["headers"])
        return httpx.Response(
            route["status_code"],
            json=route["json"],
            headers=route["headers"]
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_shopify():
    """Fresh fake store per test."""
    return FakeShopify()


@pytest.fixture
async def client(fake_shopify):
    """Unversioned client so request paths match the resource paths exactly."""
    client = ShopifyClient(
        store_url="test-store.myshopify.com",
        access_token="shpat_test_token",
        api_version=None,
        transport=httpx.MockTransport(fake_shopify)
    )

    yield client

    await client.close()
