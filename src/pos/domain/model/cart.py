"""Cart aggregate: the pending purchase at the register.

The cart is never persisted. One instance belongs to one register
session and is handed to whoever needs it; it is not global state.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """One product and how many units of it the customer is buying."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id  # type: ignore[return-value]

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


class Cart:
    """Ordered cart lines, at most one per product.

    Invariants:
    - no two lines share a product id
    - every line quantity is positive
    - ``total`` always reflects the current lines (never cached)

    Each mutation holds the cart's lock for its whole read-modify-write.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._lock = threading.Lock()

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` units, merging into an existing line."""
        if product.id is None:
            raise ValueError("Only persisted products can be added to a cart")
        if quantity <= 0:
            raise ValueError(f"Quantity to add must be positive, got {quantity}")

        with self._lock:
            index = self._index_of(product.id)
            if index is None:
                self._lines.append(CartLine(product=product, quantity=quantity))
            else:
                existing = self._lines[index]
                self._lines[index] = CartLine(
                    product=existing.product,
                    quantity=existing.quantity + quantity,
                )

    def remove_item(self, product_id: int) -> None:
        """Drop the line for ``product_id``; no-op if there is none."""
        with self._lock:
            self._lines = [line for line in self._lines if line.product_id != product_id]

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Overwrite a line's quantity.

        A quantity of zero or less removes the line. Setting the quantity
        of a product that is not in the cart does nothing.
        """
        if quantity <= 0:
            self.remove_item(product_id)
            return

        with self._lock:
            index = self._index_of(product_id)
            if index is not None:
                self._lines[index] = CartLine(
                    product=self._lines[index].product, quantity=quantity
                )

    def clear(self) -> None:
        with self._lock:
            self._lines = []

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        """Current lines in insertion order."""
        with self._lock:
            return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __len__(self) -> int:
        return len(self.lines)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: int) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None
