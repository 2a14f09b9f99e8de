"""Relational schema, declared with SQLAlchemy Core.

Repositories write these tables with explicit statements inside
explicit transactions; there is no ORM unit of work deciding what is
flushed together.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

from storefront.domain.model.customer import CustomerRole
from storefront.domain.model.order import OrderStatus

metadata = MetaData()

# DECIMAL(10,2); returned as Decimal
Price = Numeric(10, 2, asdecimal=True)


def _timestamps() -> list[Column]:
    return [
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    ]


customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("role", Enum(CustomerRole, name="customer_role"), nullable=False),
    *_timestamps(),
)

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("description", String(200), nullable=True),
    Column("price", Price, nullable=False),
    Column("category_id", Integer, nullable=True),
    Column(
        "seller_id",
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    *_timestamps(),
)

orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", Integer, ForeignKey("customers.id"), nullable=False, index=True),
    Column("total", Price, nullable=False),
    Column("status", Enum(OrderStatus, name="order_status"), nullable=False),
    *_timestamps(),
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "order_id",
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("product_id", Integer, ForeignKey("products.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("price", Price, nullable=False),
    *_timestamps(),
)
