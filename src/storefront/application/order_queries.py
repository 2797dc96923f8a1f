"""Application service: order lookups and filters (queries only).

Every method reads committed orders and returns flattened views; none
of them stage or commit anything.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal

from storefront.application.dto import OrderView, RevenueLine
from storefront.application.order_views import to_order_view
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class OrderQueryHandler:

    def __init__(self, uow: UnitOfWork, recent_limit: int = 10) -> None:
        self._uow = uow
        self._recent_limit = recent_limit

    def by_id(self, order_id: int) -> OrderView:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            return to_order_view(order, uow)

    def all(self) -> list[OrderView]:
        return self._select(lambda order: True)

    def by_user_email(self, email: str) -> list[OrderView]:
        with self._uow as uow:
            user = uow.users.get_by_email(email)
        if user is None:
            return []
        return self._select(lambda order: order.user_id == user.id)

    def by_date_range(self, start: date, end: date) -> list[OrderView]:
        """Orders placed between *start* and *end*, both inclusive."""
        return self._select(lambda order: start <= order.order_date <= end)

    def by_filters(
        self,
        user_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
        min_amount: Decimal | None = None,
    ) -> list[OrderView]:
        """Orders matching every criterion given; ``None`` means any."""

        def matches(order: Order) -> bool:
            if user_id is not None and order.user_id != user_id:
                return False
            if start is not None and order.order_date < start:
                return False
            if end is not None and order.order_date > end:
                return False
            if min_amount is not None and order.total_amount.amount < min_amount:
                return False
            return True

        return self._select(matches)

    def by_product(self, product_id: str) -> list[OrderView]:
        return self._select(lambda order: order.contains_product(product_id))

    def most_recent(self, limit: int | None = None) -> list[OrderView]:
        limit = self._recent_limit if limit is None else limit
        with self._uow as uow:
            orders = sorted(uow.orders.list_all(), key=lambda o: o.created_at, reverse=True)
            return [to_order_view(order, uow) for order in orders[:limit]]

    def revenue_by_date(self, start: date, end: date) -> list[RevenueLine]:
        """Total order value per order date within the range, oldest first."""
        with self._uow as uow:
            orders = uow.orders.list_all()

        totals: dict[date, Money] = defaultdict(Money.zero)
        for order in orders:
            if start <= order.order_date <= end:
                totals[order.order_date] = totals[order.order_date] + order.total_amount

        return [
            RevenueLine(order_date=day.isoformat(), total=str(totals[day]))
            for day in sorted(totals)
        ]

    def _select(self, predicate) -> list[OrderView]:
        with self._uow as uow:
            return [
                to_order_view(order, uow)
                for order in uow.orders.list_all()
                if predicate(order)
            ]
