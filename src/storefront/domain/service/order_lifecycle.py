"""Domain service: Order Lifecycle.

The status machine for persisted orders.  The default policy is
permissive: any member of OrderStatus is an accepted target whatever the
current status, and only unknown values are rejected.  A strict policy,
which refuses to move an order out of a terminal status, must be asked
for explicitly.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus


def parse_status(raw: str | OrderStatus) -> OrderStatus:
    """Map a raw status value onto the enumeration, or raise ValidationError."""
    if isinstance(raw, OrderStatus):
        return raw
    try:
        return OrderStatus(raw)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(
            f"Unknown order status {raw!r}; expected one of {allowed}",
            field="status",
        ) from None


class OrderLifecycle:

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def validate_transition(
        self,
        current: OrderStatus,
        requested: str | OrderStatus,
    ) -> OrderStatus:
        """Return the requested status if the move is allowed."""
        target = parse_status(requested)

        if self._strict and current.is_terminal and target != current:
            raise ValidationError(
                f"Cannot change status of an order in terminal status {current.value}",
                field="status",
            )
        return target
