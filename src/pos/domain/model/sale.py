"""Sale aggregate: the append-only ledger.

A Sale owns its SaleItems. Both are written once, at checkout, and
never changed afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pos.domain.exceptions import EmptyCartError, ValidationError
from pos.domain.model.value_objects import Money, Quantity


@dataclass
class SaleItem:
    """One sold product, with the price locked at sale time.

    ``price`` is a snapshot: later edits to the product never reach it.
    ``id`` and ``sale_id`` are None until the repository persists it.
    """

    product_id: int
    quantity: Quantity
    price: Money
    id: int | None = None
    sale_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Sale:
    """Aggregate root for a completed checkout.

    Use ``Sale.create()`` for new sales; it derives the total from the
    items.  ``__init__`` is plain so the repository can reconstitute
    stored rows as they are.
    """

    id: int | None
    code: str
    date: datetime
    total: Money

    @staticmethod
    def create(code: str, date: datetime, items: list[SaleItem]) -> Sale:
        if not items:
            raise EmptyCartError("A sale must contain at least one item")
        if not code or not code.strip():
            raise ValidationError("Sale code is required")
        if date.tzinfo is None:
            raise ValidationError("Sale date must be timezone-aware")
        return Sale(id=None, code=code, date=date, total=total_of(items))


def total_of(items: list[SaleItem]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result


# ---------------------------------------------------------------------------
# Read model for sale history
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductSnapshot:
    """Catalog fields joined onto a sale item for display.

    Deliberately has no price: the sale item's own price is the one that
    was charged.
    """

    id: int
    code: str
    description: str


@dataclass(frozen=True)
class SaleDetailLine:
    item: SaleItem
    product: ProductSnapshot


@dataclass(frozen=True)
class SaleDetail:
    """A sale with its items, in insertion order."""

    sale: Sale
    lines: list[SaleDetailLine] = field(default_factory=list)

    @property
    def items(self) -> list[SaleItem]:
        return [line.item for line in self.lines]
