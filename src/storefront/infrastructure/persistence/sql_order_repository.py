"""SQL implementation of OrderRepository.

Order creation writes the order row and every item row inside a single
transaction.  Reads fetch orders, customers, items and product names in
one joined query and regroup the rows into aggregates.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy import Select, select, update
from sqlalchemy.engine import Row

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import (
    customers,
    order_items,
    orders,
    products,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SqlOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> Order:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} is already stored", field="id")

        now = _now()
        stored_items: list[OrderItem] = []

        with self._db.transaction("create_order") as conn:
            result = conn.execute(
                orders.insert().values(
                    customer_id=order.customer.id,
                    total=order.total.amount,
                    status=order.status,
                    created_at=now,
                    updated_at=now,
                )
            )
            order_id = result.inserted_primary_key[0]

            for item in order.items:
                result = conn.execute(
                    order_items.insert().values(
                        order_id=order_id,
                        product_id=item.product_id,
                        quantity=item.quantity.value,
                        price=item.price.amount,
                        created_at=now,
                        updated_at=now,
                    )
                )
                stored_items.append(replace(item, id=result.inserted_primary_key[0]))

        return replace(
            order,
            id=order_id,
            items=stored_items,
            created_at=now,
            updated_at=now,
        )

    def get_by_id(self, order_id: int) -> Order | None:
        found = self._fetch(self._joined_select().where(orders.c.id == order_id))
        return found[0] if found else None

    def list_by_customer(self, customer_id: int) -> list[Order]:
        return self._fetch(
            self._joined_select().where(orders.c.customer_id == customer_id)
        )

    def list_all(self) -> list[Order]:
        return self._fetch(self._joined_select())

    def update_status(self, order_id: int, status: OrderStatus) -> None:
        with self._db.transaction("update_order_status") as conn:
            result = conn.execute(
                update(orders)
                .where(orders.c.id == order_id)
                .values(status=status, updated_at=_now())
            )
            if result.rowcount == 0:
                raise EntityNotFoundError("Order", order_id)

    # --- Queries --------------------------------------------------------------

    @staticmethod
    def _joined_select() -> Select:
        return (
            select(
                orders.c.id.label("order_id"),
                orders.c.total,
                orders.c.status,
                orders.c.created_at,
                orders.c.updated_at,
                customers.c.id.label("customer_id"),
                customers.c.first_name,
                customers.c.last_name,
                customers.c.email,
                customers.c.role,
                customers.c.created_at.label("customer_created_at"),
                order_items.c.id.label("item_id"),
                order_items.c.product_id,
                order_items.c.quantity,
                order_items.c.price.label("item_price"),
                products.c.name.label("product_name"),
            )
            .select_from(
                orders.join(customers, orders.c.customer_id == customers.c.id)
                .outerjoin(order_items, order_items.c.order_id == orders.c.id)
                .outerjoin(products, order_items.c.product_id == products.c.id)
            )
            .order_by(orders.c.id, order_items.c.id)
        )

    def _fetch(self, query: Select) -> list[Order]:
        with self._db.connect("read_orders") as conn:
            rows = conn.execute(query).all()
        return self._to_domain(rows)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(rows: list[Row]) -> list[Order]:
        by_id: dict[int, Order] = {}
        for row in rows:
            order = by_id.get(row.order_id)
            if order is None:
                order = Order(
                    id=row.order_id,
                    customer=Customer(
                        id=row.customer_id,
                        first_name=row.first_name,
                        last_name=row.last_name,
                        email=row.email,
                        role=row.role,
                        created_at=row.customer_created_at,
                    ),
                    items=[],
                    total=Money(row.total),
                    status=row.status,
                    created_at=row.created_at,
                    updated_at=row.updated_at,
                )
                by_id[row.order_id] = order

            if row.item_id is not None:
                order.items.append(
                    OrderItem(
                        id=row.item_id,
                        product_id=row.product_id,
                        product_name=row.product_name,
                        quantity=Quantity(row.quantity),
                        price=Money(row.item_price),
                    )
                )
        return list(by_id.values())
