"""Application service: Update Order Status use case.

Loads the order, asks the lifecycle policy whether the requested status
is acceptable and only then writes it.  A rejected request never
reaches the repository, so the stored status stays as it was.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_lifecycle import OrderLifecycle

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        lifecycle: OrderLifecycle,
    ) -> None:
        self._order_repo = order_repo
        self._lifecycle = lifecycle

    def handle(self, order_id: int, requested_status: str | OrderStatus) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)

        previous = order.status
        new_status = self._lifecycle.validate_transition(previous, requested_status)

        order.change_status(new_status)
        self._order_repo.update_status(order_id, new_status)

        logger.info(
            f"Order #{order_id} status {previous.value} -> {new_status.value}",
            extra={"order_id": order_id},
        )

        # Reload so the caller sees the timestamps the repository wrote
        updated = self._order_repo.get_by_id(order_id)
        if updated is None:
            raise EntityNotFoundError("Order", order_id)
        return order_to_dto(updated)
