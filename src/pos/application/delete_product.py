"""Application service: Delete Product use case.

Deleting is idempotent: removing a product that is already gone is not
an error and simply reports ``False``.  A product that appears in any
recorded sale cannot be deleted, otherwise sale history would lose the
code and description it displays.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import ProductInUseError
from pos.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> bool:
        with self._uow:
            if self._uow.sales.product_has_sales(product_id):
                raise ProductInUseError(
                    f"Product #{product_id} appears in recorded sales and cannot be deleted"
                )
            deleted = self._uow.products.delete(product_id)
            self._uow.commit()

        if deleted:
            logger.info("Deleted product #%s", product_id)
        else:
            logger.info("Product #%s already absent, nothing deleted", product_id)
        return deleted
