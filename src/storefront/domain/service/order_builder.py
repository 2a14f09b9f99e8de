"""Domain service: Order Builder.

Turns a raw order request (customer ID plus product/quantity pairs) into
a priced, not-yet-persisted Order aggregate.  Reads the Catalog and
Customer stores but never writes to them.

Input is checked before any lookup, and every product is resolved before
a single line is priced, so a failing request never yields a partial
order.
"""

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository


class OrderBuilder:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def build(self, customer_id: int, lines: Sequence[tuple[int, int]]) -> Order:
        """Build a PENDING order for *customer_id* from (product_id, quantity) pairs.

        Each line is priced at the product's *current* price; the order
        total is the sum of those line prices, never re-read from the
        catalog.
        """
        if not lines:
            raise ValidationError("Order must contain at least one item", field="items")

        # Phase 1: validate quantities before touching any store
        quantities = [Quantity(qty) for _, qty in lines]

        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)

        # Phase 2: resolve every product; one miss fails the whole build
        products: list[Product] = []
        for product_id, _ in lines:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            products.append(product)

        # Phase 3: price the lines from the snapshots just read
        items = [
            OrderItem.priced(
                product_id=product.id,  # type: ignore[arg-type]
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,
            )
            for product, quantity in zip(products, quantities)
        ]

        return Order.create(customer=customer, items=items)
