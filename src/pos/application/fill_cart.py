"""Application service: Fill Cart use case.

Resolves operator-typed product codes against the catalog and adds the
products to a cart owned by the caller.  The cart itself is never
stored; only the product lookup touches the store.
"""

from __future__ import annotations

from pos.application.dto import CartItemSpec
from pos.domain.exceptions import NotFoundError, ValidationError
from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.domain.model.value_objects import MAX_QUANTITY
from pos.domain.repository.unit_of_work import UnitOfWork


class FillCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart: Cart, item_specs: list[CartItemSpec]) -> None:
        """Add every spec to ``cart``.

        All codes are resolved before the cart is touched, so an unknown
        code leaves the cart exactly as it was.
        """
        resolved: list[tuple[Product, int]] = []

        with self._uow:
            for spec in item_specs:
                if spec.quantity <= 0:
                    raise ValidationError(
                        f"Quantity for '{spec.product_code}' must be positive"
                    )
                if spec.quantity > MAX_QUANTITY:
                    raise ValidationError(
                        f"Quantity for '{spec.product_code}' cannot exceed {MAX_QUANTITY}"
                    )
                product = self._uow.products.get_by_code(spec.product_code)
                if product is None:
                    raise NotFoundError(f"Product not found: '{spec.product_code}'")
                resolved.append((product, spec.quantity))

        for product, quantity in resolved:
            cart.add_item(product, quantity)

    def lookup(self, product_code: str) -> Product:
        """Resolve a single code, for callers editing an existing cart line."""
        with self._uow:
            product = self._uow.products.get_by_code(product_code)
        if product is None:
            raise NotFoundError(f"Product not found: '{product_code}'")
        return product
