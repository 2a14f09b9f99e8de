"""Fixtures for tests that run against a real (SQLite) database."""

import pytest

from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from storefront.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'storefront.db'}")
    db.create_schema()
    yield db
    db.close()


@pytest.fixture
def customer_repo(database):
    return SqlCustomerRepository(database)


@pytest.fixture
def product_repo(database):
    return SqlProductRepository(database)


@pytest.fixture
def order_repo(database):
    return SqlOrderRepository(database)


@pytest.fixture
def alice(customer_repo):
    return customer_repo.add(
        Customer.register(first_name="Alice", last_name="Liddell", email="alice@example.com")
    )


@pytest.fixture
def widget(product_repo):
    return product_repo.save(Product.create("Widget", Money.of("19.99")))


@pytest.fixture
def gadget(product_repo):
    return product_repo.save(Product.create("Gadget", Money.of("25.00")))
