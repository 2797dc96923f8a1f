"""Mapping from the Order aggregate to its flattened view."""

from __future__ import annotations

from storefront.application.dto import OrderItemView, OrderView, ProductView, UserView
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork


def product_view(product: Product) -> ProductView:
    main = product.main_image
    images = [main] + [image for image in product.images if image is not main] if main else []
    return ProductView(
        id=product.id,
        name=product.name,
        price=str(product.price),
        images=[image.url for image in images],
        specifications={spec.name: spec.value for spec in product.specifications},
    )


def _item_view(item: OrderItem, product: Product | None) -> OrderItemView:
    if product is None:
        # Product gone from the catalog: fall back to the snapshot on the line.
        view = ProductView(
            id=item.product_id,
            name=item.product_name,
            price=str(item.unit_price),
            images=[],
            specifications={},
        )
    else:
        view = product_view(product)
    return OrderItemView(
        product=view,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )


def to_order_view(order: Order, uow: UnitOfWork) -> OrderView:
    user = uow.users.get_by_id(order.user_id)
    return OrderView(
        id=order.id,  # type: ignore[arg-type]
        user=UserView(id=user.id, username=user.username) if user else None,  # type: ignore[arg-type]
        shipping_address=order.shipping.address,
        shipping_city=order.shipping.city,
        shipping_zip_code=order.shipping.zip_code,
        shipping_country=order.shipping.country,
        items=[
            _item_view(item, uow.products.get_by_id(item.product_id))
            for item in order.items
        ],
        total_amount=str(order.total_amount),
        order_date=order.order_date.isoformat(),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
