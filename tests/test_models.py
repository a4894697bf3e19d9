"""Tests for the pydantic entity and report models."""

from decimal import Decimal

import pytest
from inventory_tracker.errors import ErrorKind
from inventory_tracker.models import (
    LineStatus,
    Product,
    ProductField,
    Sale,
    SaleLine,
    SaleReceipt,
    WarningKind,
    name_key,
)
from pydantic import ValidationError


def _make_product(**overrides) -> Product:
    fields = {
        "name": "Widget",
        "category": "tools",
        "sale_price": "10.0",
        "vat_percent": "10",
        "code": "W-1",
        "available_units": 5,
        "minimum_threshold": 2,
    }
    fields.update(overrides)
    return Product(**fields)


class TestProduct:
    def test_decimal_fields_parsed_from_strings(self):
        product = _make_product()
        assert product.sale_price == Decimal("10.0")
        assert product.vat_percent == Decimal("10")

    def test_name_is_stripped(self):
        assert _make_product(name="  Widget  ").name == "Widget"

    def test_key_is_case_insensitive(self):
        assert _make_product(name="WiDgEt").key == "widget"
        assert name_key("  WIDGET ") == "widget"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"name": "   "},
            {"sale_price": "0"},
            {"sale_price": "-1"},
            {"vat_percent": "-0.5"},
            {"available_units": -1},
            {"minimum_threshold": -1},
        ],
    )
    def test_invalid_construction_rejected(self, overrides):
        with pytest.raises(ValidationError):
            _make_product(**overrides)

    def test_assignment_is_validated(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.available_units = -3
        assert product.available_units == 5

    def test_stock_flags(self):
        assert _make_product(available_units=0).is_out_of_stock
        assert _make_product(available_units=2, minimum_threshold=2).is_below_threshold
        assert not _make_product(available_units=3, minimum_threshold=2).is_below_threshold


class TestSale:
    def test_negative_profit_rejected(self):
        with pytest.raises(ValidationError):
            Sale(product_name="Widget", total_profit="-1")

    def test_key(self):
        assert Sale(product_name="Widget").key == "widget"


class TestEnums:
    def test_warning_display_names(self):
        assert WarningKind.OUT_OF_STOCK.display_name == "Out of stock"
        assert WarningKind.BELOW_THRESHOLD.value == "BelowThreshold"

    def test_product_field_values(self):
        assert ProductField("sale_price") is ProductField.SALE_PRICE
        assert ProductField.VAT_PERCENT.display_name == "VAT"
        assert len(list(ProductField)) == 6


class TestSaleReceipt:
    def test_total_counts_only_sold_lines(self):
        receipt = SaleReceipt(
            lines=[
                SaleLine(product_name="A", units=1, status=LineStatus.OK, amount=Decimal("5.5")),
                SaleLine(
                    product_name="B",
                    units=9,
                    status=LineStatus.FAILED,
                    error_kind=ErrorKind.INSUFFICIENT_STOCK,
                    message="nope",
                ),
                SaleLine(product_name="C", units=2, status=LineStatus.OK, amount=Decimal("4.5")),
            ]
        )
        assert receipt.total_amount == Decimal("10.0")
        assert [line.product_name for line in receipt.sold_lines] == ["A", "C"]
        assert [line.product_name for line in receipt.failed_lines] == ["B"]

    def test_empty_receipt_total_is_zero(self):
        assert SaleReceipt().total_amount == Decimal("0")
