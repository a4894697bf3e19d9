"""Inventory controller: one registry, one ledger, and the caller-side glue.

The controller is the boundary between the pure engine and everything
that talks to a person: it logs, supplies the report date, and turns
engine errors into per-line results for batch operations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from pathlib import Path
from typing import Any

from .config import InventorySettings, get_settings
from .errors import InventoryError
from .ledger import SalesLedger
from .models import (
    InventoryListing,
    LineStatus,
    NoSalesReport,
    Product,
    ProductDetail,
    ProductField,
    ProfitReport,
    RestockLine,
    SaleLine,
    SaleReceipt,
    StockReport,
)
from .pdf_report import (
    generate_listing_pdf,
    generate_profit_report_pdf,
    generate_stock_report_pdf,
    write_pdf,
)
from .registry import ProductRegistry
from .reports import ReportEngine
from .sales import sell, sell_batch

logger = logging.getLogger("inventory.controller")


class InventoryController:
    """Owns the inventory state for one session.

    Usage:
        controller = InventoryController(today=lambda: date(2026, 1, 31))
        controller.register([Product(name="Widget", sale_price="10", available_units=5)])
        receipt = controller.sell_batch([("Widget", 3), ("Gadget", 1)])
        print(controller.stock_report().warnings)
    """

    def __init__(
        self,
        registry: ProductRegistry | None = None,
        ledger: SalesLedger | None = None,
        settings: InventorySettings | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.registry = registry if registry is not None else ProductRegistry()
        self.ledger = ledger if ledger is not None else SalesLedger()
        self.settings = settings or get_settings()
        self._today = today
        self.reports = ReportEngine(self.registry, self.ledger)

    # -----------------------------------------------------------------
    # Catalog
    # -----------------------------------------------------------------

    def register(self, products: Iterable[Product]) -> None:
        products = list(products)
        self.registry.register(products)
        logger.info("Registered %d product(s); catalog size %d", len(products), len(self.registry))

    def remove(self, name: str) -> bool:
        removed = self.registry.remove(name)
        if removed:
            logger.info("Removed product %s", name)
        else:
            logger.warning("Remove failed, product not found: %s", name)
        return removed

    def find(self, name: str) -> Product | None:
        return self.registry.find(name)

    def product_detail(self, name: str) -> ProductDetail | None:
        return self.reports.product_detail(name)

    def update(self, name: str, field: ProductField | str, new_value: Any) -> Product:
        try:
            product = self.registry.update(name, field, new_value)
        except InventoryError as e:
            logger.warning("Update of %s failed: %s", name, e)
            raise
        logger.info("Updated %s of %s", ProductField(field).value, product.name)
        return product

    def inventory_is_empty(self) -> bool:
        return self.registry.is_empty()

    # -----------------------------------------------------------------
    # Stock movements
    # -----------------------------------------------------------------

    def restock(self, name: str, units: int) -> Product:
        try:
            product = self.registry.restock(name, units)
        except InventoryError as e:
            logger.warning("Restock of %s failed: %s", name, e)
            raise
        logger.info("Restocked %s by %d, now %d", product.name, units, product.available_units)
        return product

    def restock_batch(self, orders: Iterable[tuple[str, int]]) -> list[RestockLine]:
        """Restock several products; a failing line does not stop the rest."""
        results: list[RestockLine] = []
        for name, units in orders:
            try:
                product = self.restock(name, units)
            except InventoryError as e:
                results.append(
                    RestockLine(
                        product_name=name,
                        units=units,
                        status=LineStatus.FAILED,
                        error_kind=e.kind,
                        message=str(e),
                    )
                )
                continue
            results.append(
                RestockLine(
                    product_name=product.name,
                    units=units,
                    status=LineStatus.OK,
                    available_units=product.available_units,
                )
            )
        return results

    def sell(self, name: str, units: int) -> SaleLine:
        try:
            line = sell(self.registry, self.ledger, name, units)
        except InventoryError as e:
            logger.warning("Sale of %s failed: %s", name, e)
            raise
        logger.info("Sold %d x %s for %s", units, line.product_name, line.amount)
        return line

    def sell_batch(self, orders: Iterable[tuple[str, int]]) -> SaleReceipt:
        receipt = sell_batch(self.registry, self.ledger, orders)
        for line in receipt.failed_lines:
            logger.warning("Sale of %s failed: %s", line.product_name, line.message)
        logger.info(
            "Sale batch: %d sold, %d failed, total %s",
            len(receipt.sold_lines),
            len(receipt.failed_lines),
            receipt.total_amount,
        )
        return receipt

    # -----------------------------------------------------------------
    # Reports
    # -----------------------------------------------------------------

    def stock_report(self, as_of: date | None = None) -> StockReport:
        return self.reports.stock_report(as_of or self._today())

    def profit_report(self, as_of: date | None = None) -> ProfitReport | NoSalesReport:
        return self.reports.profit_report(as_of or self._today())

    def full_listing(self, as_of: date | None = None) -> InventoryListing:
        return self.reports.full_listing(as_of or self._today())

    # -----------------------------------------------------------------
    # PDF export
    # -----------------------------------------------------------------

    def _pdf_path(self, stem: str, as_of: date) -> Path:
        return self.settings.report_dir / f"{stem}_{as_of.isoformat()}.pdf"

    def export_stock_report_pdf(self, as_of: date | None = None) -> Path:
        report = self.stock_report(as_of)
        data = generate_stock_report_pdf(report, store_name=self.settings.store_name)
        return write_pdf(data, self._pdf_path("stock_report", report.as_of))

    def export_profit_report_pdf(self, as_of: date | None = None) -> Path:
        report = self.profit_report(as_of)
        data = generate_profit_report_pdf(
            report,
            store_name=self.settings.store_name,
            decimals=self.settings.amount_decimals,
        )
        return write_pdf(data, self._pdf_path("sales_report", report.as_of))

    def export_listing_pdf(self, as_of: date | None = None) -> Path:
        listing = self.full_listing(as_of)
        data = generate_listing_pdf(
            listing,
            store_name=self.settings.store_name,
            decimals=self.settings.amount_decimals,
        )
        return write_pdf(data, self._pdf_path("inventory_listing", listing.as_of))
