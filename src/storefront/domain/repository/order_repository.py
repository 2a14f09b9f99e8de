"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> Order:
        """Persist a new order and all of its items atomically.

        Returns the stored order with generated ids and timestamps.
        Either every row is written or none is.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> list[Order]:
        """Return every order placed by a customer, oldest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def update_status(self, order_id: int, status: OrderStatus) -> None:
        """Persist only the status of an existing order.

        Raises EntityNotFoundError if the order does not exist.  The
        transition itself is not validated here.
        """
