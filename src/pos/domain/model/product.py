"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices change, products are added to and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; it validates every field.
    The ``__init__`` stays plain so repositories can reconstitute stored
    rows without re-validating.  ``id`` is None until the product is
    first persisted.
    """

    id: int | None
    code: str
    description: str
    price: Money

    @staticmethod
    def create(code: str, description: str, price: str | int | float | Money) -> Product:
        product = Product(id=None, code="", description="", price=Money.zero())
        product.update(code, description, price)
        return product

    def update(self, code: str, description: str, price: str | int | float | Money) -> None:
        """Replace code, description and price in one step.

        Sales already recorded are unaffected; each sale item keeps the
        price it was sold at.
        """
        code = (code or "").strip()
        description = (description or "").strip()
        if not code:
            raise ValidationError("Product code is required")
        if not description:
            raise ValidationError("Product description is required")

        new_price = price if isinstance(price, Money) else Money.of(price)
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")

        self.code = code
        self.description = description
        self.price = new_price
