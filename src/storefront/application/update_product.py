"""Application service: Update Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product, ProductUpdate
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Update the given fields of a product.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        update = ProductUpdate(
            name=name,
            price=Money.of(price) if price is not None else None,
            description=description,
        )
        product.apply(update)
        return self._product_repo.save(product)
