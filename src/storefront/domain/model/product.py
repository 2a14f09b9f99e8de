"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MIN_NAME_LENGTH = 2
MAX_DESCRIPTION_LENGTH = 200


@dataclass(frozen=True)
class ProductUpdate:
    """The fields of a product that may change after creation.

    Every field is optional; ``None`` means "leave unchanged".  Each field
    is validated on its own before anything is applied.
    """

    name: str | None = None
    price: Money | None = None
    description: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.price is None and self.description is None


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root.  Kept as a mutable dataclass because
    renames and price updates are legitimate mutations on the aggregate.
    """

    id: int | None
    name: str
    price: Money
    description: str | None = None
    category_id: int | None = None
    seller_id: int | None = None

    @staticmethod
    def create(
        name: str,
        price: Money,
        description: str | None = None,
        category_id: int | None = None,
        seller_id: int | None = None,
    ) -> Product:
        return Product(
            id=None,
            name=_validate_name(name),
            price=price,
            description=_validate_description(description),
            category_id=category_id,
            seller_id=seller_id,
        )

    def apply(self, update: ProductUpdate) -> list[str]:
        """Apply *update* field by field and return the changed field names.

        All fields are validated before any of them is written, so a
        rejected update leaves the product untouched.  Price changes do
        NOT affect existing orders because orders capture a price
        snapshot at creation time.
        """
        if update.is_empty:
            raise ValidationError("Product update must change at least one field")

        changes: dict[str, object] = {}
        if update.name is not None:
            changes["name"] = _validate_name(update.name)
        if update.price is not None:
            changes["price"] = update.price
        if update.description is not None:
            changes["description"] = _validate_description(update.description)

        for field_name, value in changes.items():
            setattr(self, field_name, value)
        return list(changes)


def _validate_name(name: str) -> str:
    name = (name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at least {MIN_NAME_LENGTH} characters",
            field="name",
        )
    if not any(ch.isalpha() for ch in name):
        raise ValidationError("Product name must contain a letter", field="name")
    return name


def _validate_description(description: str | None) -> str | None:
    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description is limited to {MAX_DESCRIPTION_LENGTH} characters",
            field="description",
        )
    return description
