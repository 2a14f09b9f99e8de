"""SQL implementation of CustomerRepository (the Customer Store)."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.engine import Row

from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import customers


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._first(select(customers).where(customers.c.id == customer_id))

    def get_by_email(self, email: str) -> Customer | None:
        return self._first(
            select(customers).where(customers.c.email == email.strip().lower())
        )

    def list_all(self) -> list[Customer]:
        with self._db.connect("read_customers") as conn:
            rows = conn.execute(select(customers).order_by(customers.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def add(self, customer: Customer) -> Customer:
        now = datetime.now(timezone.utc)
        with self._db.transaction("add_customer") as conn:
            result = conn.execute(
                customers.insert().values(
                    first_name=customer.first_name,
                    last_name=customer.last_name,
                    email=customer.email,
                    role=customer.role,
                    created_at=now,
                    updated_at=now,
                )
            )
        return replace(customer, id=result.inserted_primary_key[0], created_at=now)

    # --- Internal helpers -----------------------------------------------------

    def _first(self, query) -> Customer | None:
        with self._db.connect("read_customers") as conn:
            row = conn.execute(query).first()
        return self._to_domain(row) if row is not None else None

    @staticmethod
    def _to_domain(row: Row) -> Customer:
        return Customer(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            role=row.role,
            created_at=row.created_at,
        )
