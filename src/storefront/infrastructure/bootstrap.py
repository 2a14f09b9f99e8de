"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The database handle
is opened here and passed down explicitly; whoever opens it closes it.
"""

from __future__ import annotations

from storefront.application.order_service import OrderService
from storefront.domain.exceptions import PersistenceError
from storefront.domain.service.order_lifecycle import OrderLifecycle
from storefront.infrastructure.config import Settings
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


def open_database(settings: Settings, database_url: str | None = None) -> Database:
    """Open the configured database and make sure the schema exists."""
    database = Database(database_url or settings.database_url, echo=settings.database_echo)
    try:
        database.create_schema()
    except PersistenceError:
        database.close()
        raise
    return database


def product_repository(database: Database) -> SqlProductRepository:
    return SqlProductRepository(database)


def customer_repository(database: Database) -> SqlCustomerRepository:
    return SqlCustomerRepository(database)


def order_repository(database: Database) -> SqlOrderRepository:
    return SqlOrderRepository(database)


def order_service(database: Database, settings: Settings) -> OrderService:
    return OrderService(
        order_repo=order_repository(database),
        product_repo=product_repository(database),
        customer_repo=customer_repository(database),
        lifecycle=OrderLifecycle(strict=settings.strict_status_transitions),
    )
