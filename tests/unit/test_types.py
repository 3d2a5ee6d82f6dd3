"""Unit tests for resource types and serialization helpers."""

from datetime import datetime, timezone
from decimal import Decimal

from shopify_admin import Customer, CustomerResource, Product, ProductResource, ProductsResource
from shopify_admin.shared import build_query_params, dump_payload, encode_query_value


class TestSerialization:
    """Test omit-if-unset serialization."""

    def test_empty_product_serializes_to_nothing(self):
        """Test an entity with nothing set produces an empty body."""
        assert dump_payload(Product()) == {}
        assert dump_payload(ProductResource(product=Product())) == {"product": {}}

    def test_explicit_false_is_sent(self):
        """Test explicitly set falsy values are not dropped."""
        body = dump_payload(Customer(accepts_marketing=False, orders_count=0))

        assert body == {"accepts_marketing": False, "orders_count": 0}

    def test_datetimes_serialize_iso(self):
        """Test timestamps serialize as ISO-8601 strings."""
        product = Product(published_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc))

        assert dump_payload(product) == {"published_at": "2024-05-01T09:30:00Z"}


class TestParsing:
    """Test parsing server payloads."""

    def test_missing_fields_are_none(self):
        """Test optional fields absent from the payload stay unset."""
        product = ProductResource.model_validate({"product": {"id": 1}}).product

        assert product.id == 1
        assert product.title is None
        assert product.variants is None
        assert product.image is None

    def test_unknown_fields_ignored(self):
        """Test fields this client does not model are ignored."""
        resource = ProductsResource.model_validate(
            {"products": [{"id": 1, "status": "active", "admin_graphql_api_id": "gid://shopify/Product/1"}]}
        )

        assert resource.products[0].id == 1

    def test_total_spent_precision(self):
        """Test monetary totals keep every digit."""
        customer = CustomerResource.model_validate(
            {"customer": {"total_spent": "12345678901234.99"}}
        ).customer

        assert customer.total_spent == Decimal("12345678901234.99")


class TestQueryParams:
    """Test query option encoding."""

    def test_none_options(self):
        """Test no options means no query string."""
        assert build_query_params(None) == {}

    def test_values(self):
        """Test each value type encodes as the API expects."""
        assert encode_query_value(True) == "true"
        assert encode_query_value([1, 2]) == "1,2"
        assert encode_query_value(Decimal("1.50")) == "1.50"
        assert encode_query_value(25) == "25"

    def test_sets_encode_sorted(self):
        """Test set values produce the same query string every time."""
        assert encode_query_value({30, 4, 100}) == "4,30,100"
        assert build_query_params({"ids": frozenset({"b", "a"})}) == {"ids": "a,b"}
