"""Application service: Create Order use case.

Orchestrates the flow between the Order Builder (which reads the
catalog and customer stores) and the order repository, which persists
the whole aggregate in one transaction.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_builder import OrderBuilder

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_builder: OrderBuilder,
    ) -> None:
        self._order_repo = order_repo
        self._order_builder = order_builder

    def handle(self, customer_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Build the priced aggregate (fails on empty items, unknown
           customer or product, bad quantity).
        2. Persist the order and its items atomically.
        3. Return a DTO of the stored order.
        """
        order = self._order_builder.build(
            customer_id,
            [(spec.product_id, spec.quantity) for spec in item_specs],
        )
        stored = self._order_repo.create(order)

        logger.info(
            f"Created order #{stored.id} for customer #{customer_id} "
            f"({stored.item_count} items, total {stored.total})",
            extra={"order_id": stored.id, "customer_id": customer_id},
        )
        return order_to_dto(stored)
