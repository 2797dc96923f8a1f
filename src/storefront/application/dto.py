"""Data Transfer Objects — plain containers that cross layer boundaries.

Views are flattened read models: the user is reduced to id + display
name and products to the fields a listing needs. Money is formatted
(e.g. "$15.00") and dates are ISO strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserView:
    id: int
    username: str


@dataclass(frozen=True)
class ProductView:
    id: str
    name: str
    price: str
    images: list[str]  # main image first
    specifications: dict[str, str]


@dataclass(frozen=True)
class OrderItemView:
    product: ProductView
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderView:
    id: int
    user: UserView | None
    shipping_address: str | None
    shipping_city: str | None
    shipping_zip_code: str | None
    shipping_country: str | None
    items: list[OrderItemView]
    total_amount: str
    order_date: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class CartLineView:
    product_id: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartView:
    id: int
    user_id: int
    active: bool
    items: list[CartLineView]
    total: str


@dataclass(frozen=True)
class InventoryLineView:
    product_id: str
    product_name: str
    quantity: int
    low_stock: bool
    out_of_stock: bool


@dataclass(frozen=True)
class RevenueLine:
    order_date: str
    total: str
