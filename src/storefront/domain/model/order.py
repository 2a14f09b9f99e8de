"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  It is created once,
with its full item set, and afterwards only its status changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


@dataclass(frozen=True)
class OrderItem:
    """One line of an order with the price captured at creation time.

    ``price`` is the line price (quantity x unit price when the order was
    built), not the unit price.  Frozen: a persisted line never changes.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    price: Money
    id: int | None = None

    @staticmethod
    def priced(
        product_id: int,
        product_name: str,
        quantity: Quantity,
        unit_price: Money,
    ) -> OrderItem:
        return OrderItem(
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            price=unit_price * quantity.value,  # <-- price snapshot
        )


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer: Customer
    items: list[OrderItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer: Customer, items: list[OrderItem]) -> Order:
        """Create a new, unpersisted order in PENDING status."""
        if customer.id is None:
            raise ValidationError("Order customer must be a stored customer", field="customer")

        if not items:
            raise ValidationError("Order must contain at least one item", field="items")

        return Order(
            id=None,
            customer=customer,
            items=list(items),
            total=sum_line_prices(items),
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> bool:
        """Set the status in place; returns False when nothing changed.

        Whether the transition is allowed is decided by the lifecycle
        policy before calling this.
        """
        if new_status == self.status:
            return False
        self.status = new_status
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return len(self.items)


def sum_line_prices(items: list[OrderItem]) -> Money:
    """The order total: the exact sum of the snapshotted line prices."""
    result = Money.zero()
    for item in items:
        result = result + item.price
    return result
