"""Order Service: the order use cases offered to the outer layer.

Bundles the individual handlers behind one object so a transport (the
CLI today) needs a single collaborator.  No logic lives here beyond
delegation; every failure propagates unchanged from the handler that
raised it.
"""

from __future__ import annotations

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_builder import OrderBuilder
from storefront.domain.service.order_lifecycle import OrderLifecycle


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        lifecycle: OrderLifecycle | None = None,
    ) -> None:
        builder = OrderBuilder(product_repo, customer_repo)
        self._create = CreateOrderHandler(order_repo, builder)
        self._update_status = UpdateOrderStatusHandler(
            order_repo, lifecycle or OrderLifecycle()
        )
        self._show = ShowOrderHandler(order_repo)
        self._list = ListOrdersHandler(order_repo)

    def create_order(self, customer_id: int, items: list[OrderItemSpec]) -> OrderDTO:
        return self._create.handle(customer_id, items)

    def update_order_status(self, order_id: int, status: str | OrderStatus) -> OrderDTO:
        return self._update_status.handle(order_id, status)

    def get_order(self, order_id: int) -> OrderDTO:
        return self._show.handle(order_id)

    def get_orders(self) -> list[OrderDTO]:
        return self._list.handle()

    def get_orders_by_customer(self, customer_id: int) -> list[OrderDTO]:
        return self._list.handle(customer_id)
