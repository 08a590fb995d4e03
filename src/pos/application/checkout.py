"""Application service: Checkout use case.

Turns the lines of a cart into one Sale and one SaleItem per line.
Everything is written inside a single unit of work: either the sale and
all of its items are recorded, or nothing is.

Steps:
1. Refuse an empty cart before touching the store.
2. Snapshot each line's product price into a SaleItem.
3. Pick a sale code that is not in the ledger yet.
4. Insert the sale and its items, then commit.

The handler does not own the cart; the caller clears it once this
returns.  No retries are attempted here; whether re-running a failed
checkout is safe is the caller's decision.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from pos.domain.exceptions import DuplicateCodeError, EmptyCartError, StorageError
from pos.domain.model.cart import CartLine
from pos.domain.model.sale import Sale, SaleItem
from pos.domain.model.value_objects import Quantity
from pos.domain.repository.unit_of_work import UnitOfWork
from pos.domain.service.sale_code import generate_sale_code, utc_now

logger = logging.getLogger(__name__)

# Fresh codes drawn before giving up with DuplicateCodeError.
MAX_CODE_ATTEMPTS = 5


class CheckoutHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        code_generator: Callable[[datetime], str] = generate_sale_code,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow = uow
        self._code_generator = code_generator
        self._clock = clock

    def handle(self, lines: Sequence[CartLine]) -> Sale:
        lines = list(lines)
        if not lines:
            raise EmptyCartError("Cannot check out an empty cart")

        items = [
            SaleItem(
                product_id=line.product_id,
                quantity=Quantity(line.quantity),
                price=line.product.price,  # <-- price snapshot
            )
            for line in lines
        ]

        code: str | None = None
        try:
            with self._uow:
                now = self._clock()
                code = self._unused_code(now)
                sale = Sale.create(code=code, date=now, items=items)
                self._uow.sales.add(sale, items)
                self._uow.commit()
        except StorageError as exc:
            if exc.sale_code is None:
                exc.sale_code = code
            logger.error("Checkout %s was not recorded: %s", code, exc)
            raise

        logger.info(
            "Checked out sale #%s %s: %d line(s), total %s",
            sale.id, sale.code, len(items), sale.total,
        )
        return sale

    def _unused_code(self, now: datetime) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = self._code_generator(now)
            if not self._uow.sales.code_exists(code):
                return code
            logger.warning("Sale code %s already taken, drawing another", code)
        raise DuplicateCodeError(
            f"Could not find an unused sale code after {MAX_CODE_ATTEMPTS} attempts"
        )
