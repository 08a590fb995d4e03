"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in dicts. No database, no side effects.  The fake
unit of work copies state on entry and restores it on rollback, so
handler tests can check atomicity without SQLite.
"""

from __future__ import annotations

import copy

from pos.domain.exceptions import DuplicateCodeError, StorageError
from pos.domain.model.product import Product
from pos.domain.model.sale import (
    ProductSnapshot,
    Sale,
    SaleDetail,
    SaleDetailLine,
    SaleItem,
)
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository
from pos.domain.repository.unit_of_work import UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.add(p)

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return copy.copy(product) if product is not None else None

    def get_by_code(self, code: str) -> Product | None:
        for p in self._store.values():
            if p.code == code:
                return copy.copy(p)
        return None

    def list_all(self) -> list[Product]:
        return [copy.copy(p) for p in sorted(self._store.values(), key=lambda p: p.code)]

    def add(self, product: Product) -> None:
        if self.get_by_code(product.code) is not None:
            raise DuplicateCodeError(f"Product code '{product.code}' already exists")
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id) + 1
        self._store[product.id] = copy.copy(product)

    def update(self, product: Product) -> None:
        other = self.get_by_code(product.code)
        if other is not None and other.id != product.id:
            raise DuplicateCodeError(f"Product code '{product.code}' already exists")
        self._store[product.id] = copy.copy(product)  # type: ignore[index]

    def delete(self, product_id: int) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeSaleRepository(SaleRepository):

    def __init__(self, products: FakeProductRepository) -> None:
        self._products = products
        self._sales: dict[int, Sale] = {}
        self._items: dict[int, list[SaleItem]] = {}
        self._next_id = 1
        self.fail_on_items = False

    def add(self, sale: Sale, items: list[SaleItem]) -> None:
        if self.code_exists(sale.code):
            raise DuplicateCodeError(f"Sale code '{sale.code}' already exists")
        sale.id = self._next_id
        self._next_id += 1
        self._sales[sale.id] = sale
        if self.fail_on_items:
            raise StorageError("disk full")
        for i, item in enumerate(items, start=1):
            item.sale_id = sale.id
            item.id = sale.id * 1000 + i
        self._items[sale.id] = list(items)

    def code_exists(self, code: str) -> bool:
        return any(s.code == code for s in self._sales.values())

    def list_all(self) -> list[Sale]:
        return sorted(self._sales.values(), key=lambda s: (s.date, s.id), reverse=True)

    def get_detail(self, sale_id: int) -> SaleDetail | None:
        sale = self._sales.get(sale_id)
        if sale is None:
            return None
        lines = []
        for item in self._items.get(sale_id, []):
            product = self._products.get_by_id(item.product_id)
            lines.append(
                SaleDetailLine(
                    item=item,
                    product=ProductSnapshot(
                        id=product.id, code=product.code, description=product.description  # type: ignore[union-attr, arg-type]
                    ),
                )
            )
        return SaleDetail(sale=sale, lines=lines)

    def get_detail_by_code(self, code: str) -> SaleDetail | None:
        for sale in self._sales.values():
            if sale.code == code:
                return self.get_detail(sale.id)  # type: ignore[arg-type]
        return None

    def product_has_sales(self, product_id: int) -> bool:
        return any(
            item.product_id == product_id
            for items in self._items.values()
            for item in items
        )


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products = FakeProductRepository(products)
        self.sales = FakeSaleRepository(self.products)
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: tuple | None = None

    def __enter__(self) -> FakeUnitOfWork:
        self._snapshot = (
            copy.deepcopy(self.products.__dict__),
            copy.deepcopy({k: v for k, v in self.sales.__dict__.items() if k != "_products"}),
        )
        return self

    def commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    def rollback(self) -> None:
        if self._snapshot is None:
            return
        products_state, sales_state = self._snapshot
        self.products.__dict__.update(products_state)
        self.sales.__dict__.update(sales_state)
        self._snapshot = None
        self.rollbacks += 1
