"""Application service: Register Customer use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        first_name: str,
        email: str,
        last_name: str | None = None,
        role: str = "CUSTOMER",
    ) -> Customer:
        customer = Customer.register(
            first_name=first_name, email=email, last_name=last_name, role=role
        )
        if self._customer_repo.get_by_email(customer.email) is not None:
            raise ValidationError(
                f"Email '{customer.email}' is already registered", field="email"
            )
        return self._customer_repo.add(customer)
