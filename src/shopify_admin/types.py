"""Shopify Admin REST resource types.

Every field is optional so that a model mirrors exactly what the server sent,
and so that request bodies only carry the fields a caller actually set.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class Metafield(BaseModel):
    """Key/value annotation attached to a shop, product or customer."""

    id: Optional[int] = None
    key: Optional[str] = None
    value: Optional[Any] = None
    value_type: Optional[str] = None
    namespace: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductOption(BaseModel):
    """Product option such as size or colour."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    values: Optional[List[str]] = None


class Variant(BaseModel):
    """Product variant."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    sku: Optional[str] = None
    position: Optional[int] = None
    grams: Optional[int] = None
    inventory_policy: Optional[str] = None
    price: Optional[Decimal] = None
    compare_at_price: Optional[Decimal] = None
    fulfillment_service: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    taxable: Optional[bool] = None
    barcode: Optional[str] = None
    image_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    weight: Optional[Decimal] = None
    weight_unit: Optional[str] = None
    old_inventory_quantity: Optional[int] = None
    requires_shipping: Optional[bool] = None
    metafields: Optional[List[Metafield]] = None


class Image(BaseModel):
    """Product image."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    position: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    width: Optional[int] = None
    height: Optional[int] = None
    src: Optional[str] = None
    attachment: Optional[str] = None
    filename: Optional[str] = None
    variant_ids: Optional[List[int]] = None


class Product(BaseModel):
    """Shopify product."""

    id: Optional[int] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    tags: Optional[str] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    image: Optional[Image] = None
    images: Optional[List[Image]] = None
    template_suffix: Optional[str] = None
    metafields_global_title_tag: Optional[str] = None
    metafields_global_description_tag: Optional[str] = None
    metafields: Optional[List[Metafield]] = None


class CustomerAddress(BaseModel):
    """Mailing address belonging to a customer."""

    id: Optional[int] = None
    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    province_code: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    default: Optional[bool] = None


class Customer(BaseModel):
    """Shopify customer."""

    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    state: Optional[str] = None
    note: Optional[str] = None
    verified_email: Optional[bool] = None
    multipass_identifier: Optional[str] = None
    orders_count: Optional[int] = None
    tax_exempt: Optional[bool] = None
    total_spent: Optional[Decimal] = None
    phone: Optional[str] = None
    tags: Optional[str] = None
    last_order_id: Optional[int] = None
    last_order_name: Optional[str] = None
    accepts_marketing: Optional[bool] = None
    default_address: Optional[CustomerAddress] = None
    addresses: Optional[List[CustomerAddress]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None


# Envelopes matching the products/X.json and products.json bodies


class ProductResource(BaseModel):
    product: Optional[Product] = None


class ProductsResource(BaseModel):
    products: List[Product] = Field(default_factory=list)


class CustomerResource(BaseModel):
    customer: Optional[Customer] = None


class CustomersResource(BaseModel):
    customers: List[Customer] = Field(default_factory=list)


class MetafieldResource(BaseModel):
    metafield: Optional[Metafield] = None


class MetafieldsResource(BaseModel):
    metafields: List[Metafield] = Field(default_factory=list)


class CountResource(BaseModel):
    count: int = 0


# Query options


class ListOptions(BaseModel):
    """Options accepted by collection endpoints."""

    page: Optional[int] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    vendor: Optional[str] = None
    ids: Optional[List[int]] = None


class CountOptions(BaseModel):
    """Options accepted by count endpoints."""

    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None


class CustomerSearchOptions(BaseModel):
    """Options accepted by customers/search.json."""

    page: Optional[int] = None
    limit: Optional[int] = None
    fields: Optional[str] = None
    order: Optional[str] = None
    query: Optional[str] = None
