"""Customer record, as read from the Customer Store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from storefront.domain.exceptions import ValidationError


class CustomerRole(Enum):
    CUSTOMER = "CUSTOMER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"


@dataclass
class Customer:
    id: int | None
    first_name: str
    email: str
    last_name: str | None = None
    role: CustomerRole = CustomerRole.CUSTOMER
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name

    @staticmethod
    def register(
        first_name: str,
        email: str,
        last_name: str | None = None,
        role: str = CustomerRole.CUSTOMER.value,
    ) -> Customer:
        """Build a new customer, enforcing the profile field rules."""
        first_name = (first_name or "").strip()
        if len(first_name) < 2:
            raise ValidationError(
                "First name must be at least 2 characters", field="first_name"
            )
        if last_name is not None and len(last_name.strip()) < 2:
            raise ValidationError(
                "Last name must be at least 2 characters", field="last_name"
            )
        email = (email or "").strip()
        local, _, domain = email.partition("@")
        if not local or "." not in domain:
            raise ValidationError(f"Invalid email address: {email!r}", field="email")
        try:
            parsed_role = CustomerRole(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}", field="role") from exc

        return Customer(
            id=None,
            first_name=first_name,
            last_name=last_name.strip() if last_name else None,
            email=email.lower(),
            role=parsed_role,
        )
