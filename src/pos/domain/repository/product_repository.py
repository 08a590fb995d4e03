"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live
elsewhere and are handed out by a unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return a product by its exact code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a new product and assign its ``id``.

        Raises DuplicateCodeError if the code is taken.
        """

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product. Returns False if it did not exist."""
