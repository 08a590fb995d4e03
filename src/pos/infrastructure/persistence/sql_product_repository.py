"""SQL implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, RowMapping

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.errors import translate_errors
from pos.infrastructure.persistence.schema import products


class SqlProductRepository(ProductRepository):

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with translate_errors("load product"):
            row = self._conn.execute(
                select(products).where(products.c.id == product_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def get_by_code(self, code: str) -> Product | None:
        with translate_errors("load product"):
            row = self._conn.execute(
                select(products).where(products.c.code == code.strip())
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        with translate_errors("list products"):
            rows = self._conn.execute(
                select(products).order_by(products.c.code, products.c.id)
            ).mappings().all()
        return [self._to_domain(row) for row in rows]

    def add(self, product: Product) -> None:
        with translate_errors(
            "add product",
            duplicate_message=f"Product code '{product.code}' already exists",
        ):
            result = self._conn.execute(insert(products).values(**self._to_raw(product)))
        product.id = result.inserted_primary_key[0]

    def update(self, product: Product) -> None:
        with translate_errors(
            "update product",
            duplicate_message=f"Product code '{product.code}' already exists",
        ):
            self._conn.execute(
                update(products)
                .where(products.c.id == product.id)
                .values(**self._to_raw(product))
            )

    def delete(self, product_id: int) -> bool:
        with translate_errors(
            "delete product",
            in_use_message=f"Product #{product_id} appears in recorded sales and cannot be deleted",
        ):
            result = self._conn.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "code": product.code,
            "description": product.description,
            "price": product.price.amount,
        }

    @staticmethod
    def _to_domain(row: RowMapping) -> Product:
        return Product(
            id=row["id"],
            code=row["code"],
            description=row["description"],
            price=Money.of(row["price"]),
        )
