"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the outer layer and application layer without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.order import Order

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class CustomerDTO:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order line as displayed to the user."""

    id: int | None
    product_id: int
    product_name: str
    quantity: int
    price: str  # line price, formatted, e.g. "$59.97"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer: CustomerDTO
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str
    updated_at: str


def _format_timestamp(value: datetime | None) -> str:
    return value.strftime(TIMESTAMP_FORMAT) if value is not None else ""


def order_to_dto(order: Order) -> OrderDTO:
    customer = order.customer
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer=CustomerDTO(
            id=customer.id,  # type: ignore[arg-type]
            name=customer.display_name,
            email=customer.email,
        ),
        status=order.status.value,
        items=[
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=str(item.price),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=_format_timestamp(order.created_at),
        updated_at=_format_timestamp(order.updated_at),
    )
