"""Application service: Show Sale / List Sales use cases (queries)."""

from __future__ import annotations

from pos.domain.exceptions import NotFoundError
from pos.domain.model.sale import Sale, SaleDetail
from pos.domain.repository.unit_of_work import UnitOfWork


class ListSalesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Sale]:
        """All sales, most recent first."""
        with self._uow:
            return self._uow.sales.list_all()


class ShowSaleHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, sale_id: int) -> SaleDetail:
        """A sale with its items.

        Item prices are the ones charged at checkout, not the catalog's
        current prices.
        """
        with self._uow:
            detail = self._uow.sales.get_detail(sale_id)
        if detail is None:
            raise NotFoundError(f"Sale #{sale_id} not found")
        return detail

    def handle_code(self, code: str) -> SaleDetail:
        with self._uow:
            detail = self._uow.sales.get_detail_by_code(code)
        if detail is None:
            raise NotFoundError(f"Sale '{code}' not found")
        return detail
