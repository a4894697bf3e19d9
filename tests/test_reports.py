"""Tests for ReportEngine projections."""

from datetime import date
from decimal import Decimal

import pytest
from inventory_tracker.ledger import SalesLedger
from inventory_tracker.models import (
    NoSalesReport,
    Product,
    ProfitReport,
    WarningKind,
)
from inventory_tracker.registry import ProductRegistry
from inventory_tracker.reports import ReportEngine, classify_stock
from inventory_tracker.sales import sell

AS_OF = date(2026, 1, 31)


def _make_product(name, available_units, minimum_threshold, sale_price="10.0", vat_percent="10"):
    return Product(
        name=name,
        category="misc",
        sale_price=sale_price,
        vat_percent=vat_percent,
        code=f"{name.upper()}-01",
        available_units=available_units,
        minimum_threshold=minimum_threshold,
    )


@pytest.fixture
def registry() -> ProductRegistry:
    reg = ProductRegistry()
    reg.register([
        _make_product("Widget", 5, 2),
        _make_product("Gadget", 0, 3),
        _make_product("Doohickey", 3, 3),
        _make_product("Gizmo", 10, 0),
    ])
    return reg


@pytest.fixture
def ledger() -> SalesLedger:
    return SalesLedger()


@pytest.fixture
def engine(registry, ledger) -> ReportEngine:
    return ReportEngine(registry, ledger)


class TestClassifyStock:
    def test_out_of_stock_takes_precedence(self):
        assert classify_stock(_make_product("A", 0, 5)) == WarningKind.OUT_OF_STOCK

    def test_zero_threshold_zero_units_is_out_of_stock(self):
        assert classify_stock(_make_product("A", 0, 0)) == WarningKind.OUT_OF_STOCK

    def test_at_threshold_is_below(self):
        assert classify_stock(_make_product("A", 3, 3)) == WarningKind.BELOW_THRESHOLD

    def test_healthy(self):
        assert classify_stock(_make_product("A", 4, 3)) is None


class TestStockReport:
    def test_rows_and_total(self, engine):
        report = engine.stock_report(AS_OF)
        assert report.as_of == AS_OF
        assert [r.name for r in report.rows] == ["Widget", "Gadget", "Doohickey", "Gizmo"]
        assert report.rows[0].code == "WIDGET-01"
        assert report.total_units == 18

    def test_warnings(self, engine):
        report = engine.stock_report(AS_OF)
        assert [(w.product_name, w.kind) for w in report.warnings] == [
            ("Gadget", WarningKind.OUT_OF_STOCK),
            ("Doohickey", WarningKind.BELOW_THRESHOLD),
        ]
        assert report.warnings_of(WarningKind.BELOW_THRESHOLD)[0].available_units == 3

    def test_warning_after_sale(self, engine, registry, ledger):
        sell(registry, ledger, "Widget", 3)
        report = engine.stock_report(AS_OF)
        kinds = {w.product_name: w.kind for w in report.warnings}
        assert kinds["Widget"] == WarningKind.BELOW_THRESHOLD

    def test_empty_registry(self, ledger):
        report = ReportEngine(ProductRegistry(), ledger).stock_report(AS_OF)
        assert report.rows == []
        assert report.total_units == 0
        assert not report.has_warnings


class TestProfitReport:
    def test_no_sales(self, engine):
        report = engine.profit_report(AS_OF)
        assert isinstance(report, NoSalesReport)
        assert report.as_of == AS_OF

    def test_rows_follow_ledger_order(self, engine, registry, ledger):
        sell(registry, ledger, "Widget", 1)  # 11.0
        sell(registry, ledger, "Gizmo", 4)  # 44.0
        report = engine.profit_report(AS_OF)

        assert isinstance(report, ProfitReport)
        assert [(r.name, r.total_profit) for r in report.rows] == [
            ("Gizmo", Decimal("44.0")),
            ("Widget", Decimal("11.0")),
        ]
        assert report.total_profit == Decimal("55.0")

    def test_includes_removed_products(self, engine, registry, ledger):
        sell(registry, ledger, "Widget", 1)
        registry.remove("Widget")
        report = engine.profit_report(AS_OF)
        assert [r.name for r in report.rows] == ["Widget"]


class TestFullListing:
    def test_all_fields_in_insertion_order(self, engine):
        listing = engine.full_listing(AS_OF)
        assert [r.name for r in listing.rows] == ["Widget", "Gadget", "Doohickey", "Gizmo"]
        first = listing.rows[0]
        assert first.category == "misc"
        assert first.sale_price == Decimal("10.0")
        assert first.vat_percent == Decimal("10")
        assert first.available_units == 5
        assert first.minimum_threshold == 2

    def test_empty_registry(self, ledger):
        listing = ReportEngine(ProductRegistry(), ledger).full_listing(AS_OF)
        assert listing.rows == []
        assert listing.is_empty


class TestReadOnly:
    def test_reports_do_not_mutate(self, engine, registry, ledger):
        sell(registry, ledger, "Widget", 1)
        before_units = [p.available_units for p in registry.products()]
        before_sales = ledger.entries()

        engine.stock_report(AS_OF)
        engine.profit_report(AS_OF)
        listing = engine.full_listing(AS_OF)
        listing.rows[0].available_units = 999

        assert [p.available_units for p in registry.products()] == before_units
        assert ledger.entries() == before_sales


class TestProductDetail:
    def test_found(self, engine):
        detail = engine.product_detail("gizmo")
        assert detail.name == "Gizmo"
        assert detail.available_units == 10
        assert detail.sale_price == Decimal("10.0")

    def test_missing(self, engine):
        assert engine.product_detail("Sprocket") is None
