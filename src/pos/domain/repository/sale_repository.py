"""Abstract repository for the Sale aggregate (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.sale import Sale, SaleDetail, SaleItem


class SaleRepository(ABC):

    @abstractmethod
    def add(self, sale: Sale, items: list[SaleItem]) -> None:
        """Insert a sale and all of its items, assigning their ids.

        Raises DuplicateCodeError if the sale code is taken.
        """

    @abstractmethod
    def code_exists(self, code: str) -> bool:
        """True if a sale with this code is already recorded."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, most recent first."""

    @abstractmethod
    def get_detail(self, sale_id: int) -> SaleDetail | None:
        """Return a sale with its items joined to catalog data, or None."""

    @abstractmethod
    def get_detail_by_code(self, code: str) -> SaleDetail | None:
        """Same as ``get_detail`` but looked up by sale code."""

    @abstractmethod
    def product_has_sales(self, product_id: int) -> bool:
        """True if any sale item references the product."""
