"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from storefront.application.dto import OrderItemSpec
from storefront.application.order_service import OrderService
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_lifecycle import OrderLifecycle
from tests.fakes import (
    FakeCustomerRepository,
    FakeOrderRepository,
    FakeProductRepository,
)


def _setup(strict: bool = False) -> tuple[OrderService, FakeOrderRepository, int]:
    """Build the service and place one PENDING order; returns its ID too."""
    order_repo = FakeOrderRepository()
    service = OrderService(
        order_repo,
        FakeProductRepository([Product(id=1, name="Widget", price=Money.of("19.99"))]),
        FakeCustomerRepository([Customer(id=1, first_name="Alice", email="alice@example.com")]),
        lifecycle=OrderLifecycle(strict=strict),
    )
    dto = service.create_order(1, [OrderItemSpec(1, 1)])
    return service, order_repo, dto.id


class TestUpdateOrderStatus:

    def test_pending_to_shipped(self):
        service, order_repo, order_id = _setup()
        dto = service.update_order_status(order_id, "SHIPPED")
        assert dto.status == "SHIPPED"
        assert order_repo.get_by_id(order_id).status == OrderStatus.SHIPPED

    def test_accepts_enum_member(self):
        service, _, order_id = _setup()
        dto = service.update_order_status(order_id, OrderStatus.PROCESSING)
        assert dto.status == "PROCESSING"

    def test_unknown_status_leaves_stored_status_unchanged(self):
        service, _, order_id = _setup()
        service.update_order_status(order_id, "SHIPPED")

        with pytest.raises(ValidationError, match="Unknown order status"):
            service.update_order_status(order_id, "RECALLED")

        assert service.get_order(order_id).status == "SHIPPED"

    def test_unknown_order(self):
        service, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #999 not found"):
            service.update_order_status(999, "SHIPPED")

    def test_permissive_by_default(self):
        service, _, order_id = _setup()
        service.update_order_status(order_id, "CANCELLED")
        dto = service.update_order_status(order_id, "PENDING")
        assert dto.status == "PENDING"

    def test_strict_policy_blocks_leaving_terminal_status(self):
        service, _, order_id = _setup(strict=True)
        service.update_order_status(order_id, "DELIVERED")
        with pytest.raises(ValidationError, match="terminal status"):
            service.update_order_status(order_id, "PROCESSING")
        assert service.get_order(order_id).status == "DELIVERED"

    def test_items_and_total_untouched(self):
        service, _, order_id = _setup()
        before = service.get_order(order_id)
        after = service.update_order_status(order_id, "PROCESSING")
        assert after.items == before.items
        assert after.total == before.total
