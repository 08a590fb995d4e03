"""Abstract unit of work.

A unit of work is a scoped transaction: entering it begins one, and
leaving it rolls back whatever was not explicitly committed, on an
exception, an early return, or a forgotten ``commit()``.

    with uow:
        uow.products.add(product)
        uow.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository


class UnitOfWork(ABC):

    products: ProductRepository
    sales: SaleRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write since ``__enter__`` durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write. Safe to call after commit."""
