"""Read-only report projections over a registry and a ledger.

Nothing here mutates state or reads the clock: the report date is always
passed in by the caller.
"""

from __future__ import annotations

from datetime import date

from .ledger import SalesLedger
from .models import (
    InventoryListing,
    ListingRow,
    NoSalesReport,
    Product,
    ProductDetail,
    ProfitReport,
    ProfitReportRow,
    StockReport,
    StockReportRow,
    StockWarning,
    WarningKind,
)
from .registry import ProductRegistry


def classify_stock(product: Product) -> WarningKind | None:
    """Warning for a product, if any. Out of stock wins over low stock."""
    if product.is_out_of_stock:
        return WarningKind.OUT_OF_STOCK
    if product.is_below_threshold:
        return WarningKind.BELOW_THRESHOLD
    return None


class ReportEngine:
    """Build stock, profit and listing reports.

    Usage:
        engine = ReportEngine(registry, ledger)
        report = engine.stock_report(date(2026, 1, 31))
        for warning in report.warnings:
            print(warning.product_name, warning.kind.display_name)
    """

    def __init__(self, registry: ProductRegistry, ledger: SalesLedger):
        self.registry = registry
        self.ledger = ledger

    def stock_report(self, as_of: date) -> StockReport:
        rows: list[StockReportRow] = []
        warnings: list[StockWarning] = []
        total_units = 0

        for product in self.registry.products():
            rows.append(
                StockReportRow(
                    name=product.name,
                    code=product.code,
                    available_units=product.available_units,
                    minimum_threshold=product.minimum_threshold,
                )
            )
            total_units += product.available_units

            kind = classify_stock(product)
            if kind is not None:
                warnings.append(
                    StockWarning(
                        product_name=product.name,
                        kind=kind,
                        available_units=product.available_units,
                        minimum_threshold=product.minimum_threshold,
                    )
                )

        return StockReport(
            as_of=as_of, rows=rows, total_units=total_units, warnings=warnings
        )

    def profit_report(self, as_of: date) -> ProfitReport | NoSalesReport:
        entries = self.ledger.entries()
        if not entries:
            return NoSalesReport(as_of=as_of)

        rows = [
            ProfitReportRow(name=sale.product_name, total_profit=sale.total_profit)
            for sale in entries
        ]
        return ProfitReport(
            as_of=as_of,
            rows=rows,
            total_profit=sum(row.total_profit for row in rows),
        )

    def full_listing(self, as_of: date) -> InventoryListing:
        return InventoryListing(
            as_of=as_of,
            rows=[
                ListingRow(
                    name=p.name,
                    category=p.category,
                    sale_price=p.sale_price,
                    vat_percent=p.vat_percent,
                    code=p.code,
                    available_units=p.available_units,
                    minimum_threshold=p.minimum_threshold,
                )
                for p in self.registry.products()
            ],
        )

    def product_detail(self, name: str) -> ProductDetail | None:
        product = self.registry.find(name)
        if product is None:
            return None
        return ProductDetail(
            name=product.name,
            category=product.category,
            sale_price=product.sale_price,
            available_units=product.available_units,
        )
