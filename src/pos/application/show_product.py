"""Application service: Show Product / List Products use cases (queries)."""

from __future__ import annotations

from pos.domain.exceptions import NotFoundError
from pos.domain.model.product import Product
from pos.domain.repository.unit_of_work import UnitOfWork


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> Product:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Product]:
        with self._uow:
            return self._uow.products.list_all()
