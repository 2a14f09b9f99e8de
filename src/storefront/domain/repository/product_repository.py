"""Abstract repository for Product aggregate (the Catalog Store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product and return it with its ID."""
