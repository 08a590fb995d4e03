"""Unit tests for the Sale aggregate."""

from datetime import datetime, timezone

import pytest

from pos.domain.exceptions import EmptyCartError, ValidationError
from pos.domain.model.sale import Sale, SaleItem, total_of
from pos.domain.model.value_objects import Money, Quantity

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _item(product_id: int = 1, qty: int = 1, price: str = "10.00") -> SaleItem:
    return SaleItem(product_id=product_id, quantity=Quantity(qty), price=Money.of(price))


class TestSaleCreate:

    def test_total_is_sum_of_items(self):
        sale = Sale.create("V1", NOW, [_item(1, 3, "10.00"), _item(2, 2, "0.75")])
        assert sale.total == Money.of("31.50")
        assert sale.id is None  # assigned by repository

    def test_no_items_rejected(self):
        with pytest.raises(EmptyCartError):
            Sale.create("V1", NOW, [])

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError, match="code is required"):
            Sale.create(" ", NOW, [_item()])

    def test_naive_date_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            Sale.create("V1", datetime(2026, 10, 19, 12, 0), [_item()])


class TestSaleItem:

    def test_line_total(self):
        assert _item(qty=4, price="2.50").line_total == Money.of("10.00")

    def test_total_of_empty_is_zero(self):
        assert total_of([]) == Money.zero()
