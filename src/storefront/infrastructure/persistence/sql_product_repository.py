"""SQL implementation of ProductRepository (the Catalog Store)."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.engine import Row

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.tables import products


class SqlProductRepository(ProductRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._db.connect("read_products") as conn:
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        with self._db.connect("read_products") as conn:
            rows = conn.execute(select(products).order_by(products.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def save(self, product: Product) -> Product:
        now = datetime.now(timezone.utc)
        values = self._to_raw(product)

        with self._db.transaction("save_product") as conn:
            if product.id is None:
                result = conn.execute(
                    products.insert().values(**values, created_at=now, updated_at=now)
                )
                return replace(product, id=result.inserted_primary_key[0])

            result = conn.execute(
                update(products)
                .where(products.c.id == product.id)
                .values(**values, updated_at=now)
            )
            if result.rowcount == 0:
                raise EntityNotFoundError("Product", product.id)
        return product

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": product.price.amount,
            "category_id": product.category_id,
            "seller_id": product.seller_id,
        }

    @staticmethod
    def _to_domain(row: Row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(row.price),
            description=row.description,
            category_id=row.category_id,
            seller_id=row.seller_id,
        )
