"""Unit tests for the Product aggregate."""

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


class TestProductCreate:

    def test_happy_path(self):
        product = Product.create("A1", "Widget", "10.00")
        assert product.id is None  # assigned by repository
        assert product.code == "A1"
        assert product.description == "Widget"
        assert product.price == Money.of("10.00")

    def test_strips_whitespace(self):
        product = Product.create("  A1 ", " Widget  ", "1")
        assert product.code == "A1"
        assert product.description == "Widget"

    def test_accepts_money(self):
        product = Product.create("A1", "Widget", Money.of("2.50"))
        assert product.price == Money.of("2.50")

    @pytest.mark.parametrize("code", ["", "   "])
    def test_empty_code_rejected(self, code):
        with pytest.raises(ValidationError, match="code is required"):
            Product.create(code, "Widget", "10")

    def test_empty_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            Product.create("A1", "", "10")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create("A1", "Widget", "0")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("A1", "Widget", "-5")

    def test_unparseable_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Product.create("A1", "Widget", "abc")

    def test_sub_cent_price_rejected(self):
        with pytest.raises(ValidationError, match="fractions of a cent"):
            Product.create("A1", "Widget", "10.005")


class TestProductUpdate:

    def test_replaces_all_fields(self):
        product = Product(id=7, code="A1", description="Widget", price=Money.of("10"))
        product.update("A2", "Big widget", "12.50")
        assert product == Product(id=7, code="A2", description="Big widget", price=Money.of("12.50"))

    def test_invalid_update_leaves_product_unchanged(self):
        product = Product(id=7, code="A1", description="Widget", price=Money.of("10"))
        with pytest.raises(ValidationError):
            product.update("A2", "Big widget", "0")
        assert product.code == "A1"
        assert product.price == Money.of("10")
