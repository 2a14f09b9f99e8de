"""Abstract repository for customers (the Customer Store)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by email address, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Store a new customer and return it with its ID."""
