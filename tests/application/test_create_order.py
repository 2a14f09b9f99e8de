"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories — no database.
"""

import pytest

from storefront.application.dto import OrderItemSpec
from storefront.application.order_service import OrderService
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeCustomerRepository,
    FakeOrderRepository,
    FakeProductRepository,
)


def _setup(
    products: list[Product] | None = None,
) -> tuple[OrderService, FakeOrderRepository, FakeProductRepository]:
    """Build the service with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id=1, name="Widget", price=Money.of("19.99")),
            Product(id=2, name="Gadget", price=Money.of("25.00")),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    customer_repo = FakeCustomerRepository([
        Customer(id=1, first_name="Alice", last_name="Liddell", email="alice@example.com"),
        Customer(id=2, first_name="Bob", email="bob@example.com"),
    ])
    service = OrderService(order_repo, product_repo, customer_repo)
    return service, order_repo, product_repo


class TestCreateOrderHappyPath:

    def test_single_item_order(self):
        service, _, _ = _setup()
        dto = service.create_order(1, [OrderItemSpec(product_id=1, quantity=3)])
        assert dto.status == "PENDING"
        assert dto.total == "$59.97"
        assert len(dto.items) == 1
        assert dto.items[0].product_id == 1
        assert dto.items[0].quantity == 3
        assert dto.items[0].price == "$59.97"

    def test_customer_profile_in_result(self):
        service, _, _ = _setup()
        dto = service.create_order(1, [OrderItemSpec(1, 1)])
        assert dto.customer.id == 1
        assert dto.customer.name == "Alice Liddell"
        assert dto.customer.email == "alice@example.com"

    def test_item_count_matches_request(self):
        service, _, _ = _setup()
        specs = [OrderItemSpec(1, 1), OrderItemSpec(2, 4), OrderItemSpec(1, 2)]
        dto = service.create_order(2, specs)
        assert len(dto.items) == len(specs)
        assert dto.total == "$159.97"

    def test_assigns_ids_and_timestamps(self):
        service, _, _ = _setup()
        dto = service.create_order(1, [OrderItemSpec(1, 1)])
        assert dto.id == 1
        assert all(item.id is not None for item in dto.items)
        assert dto.created_at
        assert dto.updated_at

    def test_persists_order(self):
        service, order_repo, _ = _setup()
        dto = service.create_order(1, [OrderItemSpec(1, 1)])
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.customer.id == 1

    def test_sequential_ids(self):
        service, _, _ = _setup()
        dto1 = service.create_order(1, [OrderItemSpec(1, 1)])
        dto2 = service.create_order(2, [OrderItemSpec(2, 1)])
        assert dto2.id == dto1.id + 1


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        service, _, product_repo = _setup()

        # Create order at current price
        dto = service.create_order(1, [OrderItemSpec(1, 1)])
        assert dto.total == "$19.99"

        # Change the product price
        widget = product_repo.get_by_id(1)
        widget.price = Money.of("99.99")
        product_repo.save(widget)

        # Existing order still has original price
        saved = service.get_order(dto.id)
        assert saved.total == "$19.99"
        assert saved.items[0].price == "$19.99"


class TestCreateOrderValidation:

    @pytest.mark.parametrize("customer_id", [1, 2, 999])
    def test_empty_items_rejected_for_any_customer(self, customer_id):
        service, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            service.create_order(customer_id, [])

    def test_unknown_product_persists_nothing(self):
        service, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product #404 not found"):
            service.create_order(1, [OrderItemSpec(1, 1), OrderItemSpec(404, 1)])
        assert service.get_orders_by_customer(1) == []
        assert order_repo.list_all() == []

    def test_unknown_customer_rejected(self):
        service, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Customer #9 not found"):
            service.create_order(9, [OrderItemSpec(1, 1)])

    def test_negative_quantity_rejected(self):
        service, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            service.create_order(1, [OrderItemSpec(1, -1)])
