"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from pos.domain.model.product import Product
from pos.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, code: str, description: str, price: str) -> Product:
        """Add a new product to the catalog.

        Code uniqueness is left to the store's unique constraint; the
        repository reports a clash as DuplicateCodeError.
        """
        product = Product.create(code=code, description=description, price=price)

        with self._uow:
            self._uow.products.add(product)
            self._uow.commit()

        logger.info("Created product #%s '%s' at %s", product.id, product.code, product.price)
        return product
