"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import NotFoundError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, product_id: int, code: str, description: str, price: str | Money
    ) -> Product:
        """Replace a product's code, description and price.

        This does NOT affect any recorded sale; each sale item captured
        a price snapshot at checkout.
        """
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product with ID {product_id} not found")

            product.update(code=code, description=description, price=price)
            self._uow.products.update(product)
            self._uow.commit()

        logger.info("Updated product #%s '%s' to %s", product.id, product.code, product.price)
        return product
