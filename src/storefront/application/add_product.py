"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        price: str,
        description: str | None = None,
        category_id: int | None = None,
        seller_id: int | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if seller_id is not None and self._customer_repo.get_by_id(seller_id) is None:
            raise EntityNotFoundError("Seller", seller_id)

        product = Product.create(
            name=name,
            price=Money.of(price),
            description=description,
            category_id=category_id,
            seller_id=seller_id,
        )
        return self._product_repo.save(product)
