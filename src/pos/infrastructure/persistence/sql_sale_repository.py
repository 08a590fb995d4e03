"""SQL implementation of SaleRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import exists, insert, select
from sqlalchemy.engine import Connection, RowMapping

from pos.domain.model.sale import (
    ProductSnapshot,
    Sale,
    SaleDetail,
    SaleDetailLine,
    SaleItem,
)
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.sale_repository import SaleRepository
from pos.infrastructure.persistence.errors import translate_errors
from pos.infrastructure.persistence.schema import products, sale_items, sales


class SqlSaleRepository(SaleRepository):

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    # --- SaleRepository interface ---------------------------------------------

    def add(self, sale: Sale, items: list[SaleItem]) -> None:
        with translate_errors(
            "record sale",
            duplicate_message=f"Sale code '{sale.code}' already exists",
        ):
            result = self._conn.execute(insert(sales).values(**self._sale_to_raw(sale)))
            sale_id = result.inserted_primary_key[0]

        with translate_errors("record sale items"):
            for item in items:
                item.sale_id = sale_id
                result = self._conn.execute(
                    insert(sale_items).values(**self._item_to_raw(item))
                )
                item.id = result.inserted_primary_key[0]

        sale.id = sale_id

    def code_exists(self, code: str) -> bool:
        with translate_errors("look up sale code"):
            return bool(
                self._conn.execute(select(exists().where(sales.c.code == code))).scalar()
            )

    def list_all(self) -> list[Sale]:
        with translate_errors("list sales"):
            rows = self._conn.execute(
                select(sales).order_by(sales.c.date.desc(), sales.c.id.desc())
            ).mappings().all()
        return [self._sale_to_domain(row) for row in rows]

    def get_detail(self, sale_id: int) -> SaleDetail | None:
        return self._load_detail(sales.c.id == sale_id)

    def get_detail_by_code(self, code: str) -> SaleDetail | None:
        return self._load_detail(sales.c.code == code)

    def product_has_sales(self, product_id: int) -> bool:
        with translate_errors("check product sales"):
            return bool(
                self._conn.execute(
                    select(exists().where(sale_items.c.product_id == product_id))
                ).scalar()
            )

    # --- Queries --------------------------------------------------------------

    def _load_detail(self, criterion) -> SaleDetail | None:
        with translate_errors("load sale"):
            sale_row = self._conn.execute(select(sales).where(criterion)).mappings().first()
            if sale_row is None:
                return None

            # Price comes from sale_items only; products contributes display fields.
            item_rows = self._conn.execute(
                select(
                    sale_items,
                    products.c.code.label("product_code"),
                    products.c.description.label("product_description"),
                )
                .join(products, sale_items.c.product_id == products.c.id)
                .where(sale_items.c.sale_id == sale_row["id"])
                .order_by(sale_items.c.id)
            ).mappings().all()

        return SaleDetail(
            sale=self._sale_to_domain(sale_row),
            lines=[
                SaleDetailLine(
                    item=self._item_to_domain(row),
                    product=ProductSnapshot(
                        id=row["product_id"],
                        code=row["product_code"],
                        description=row["product_description"],
                    ),
                )
                for row in item_rows
            ],
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _sale_to_raw(sale: Sale) -> dict:
        return {
            "code": sale.code,
            "date": sale.date.astimezone(timezone.utc).isoformat(timespec="microseconds"),
            "total": sale.total.amount,
        }

    @staticmethod
    def _item_to_raw(item: SaleItem) -> dict:
        return {
            "sale_id": item.sale_id,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
            "price": item.price.amount,
        }

    @staticmethod
    def _sale_to_domain(row: RowMapping) -> Sale:
        return Sale(
            id=row["id"],
            code=row["code"],
            date=datetime.fromisoformat(row["date"]),
            total=Money.of(row["total"]),
        )

    @staticmethod
    def _item_to_domain(row: RowMapping) -> SaleItem:
        return SaleItem(
            id=row["id"],
            sale_id=row["sale_id"],
            product_id=row["product_id"],
            quantity=Quantity(row["quantity"]),
            price=Money.of(row["price"]),
        )
