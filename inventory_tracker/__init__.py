"""Inventory Tracker: in-memory product registry and sales ledger.

Registers products, adjusts stock on restock and sale, accumulates
VAT-inclusive profit per product, and renders stock, profit and listing
reports as text or PDF.

Usage:
    from datetime import date
    from inventory_tracker import InventoryController, Product

    controller = InventoryController(today=date.today)
    controller.register([
        Product(name="Widget", sale_price="10.0", vat_percent="10",
                available_units=5, minimum_threshold=2),
    ])
    controller.sell("widget", 3)
    print(controller.stock_report().warnings)
"""

from .config import InventorySettings, get_settings
from .controller import InventoryController
from .errors import (
    ErrorKind,
    InsufficientStockError,
    InvalidArgumentError,
    InventoryError,
    ProductNotFoundError,
)
from .ledger import SalesLedger
from .models import (
    InventoryListing,
    LineStatus,
    ListingRow,
    NoSalesReport,
    Product,
    ProductDetail,
    ProductField,
    ProfitReport,
    ProfitReportRow,
    RestockLine,
    Sale,
    SaleLine,
    SaleReceipt,
    StockReport,
    StockReportRow,
    StockWarning,
    WarningKind,
)
from .registry import ProductRegistry
from .reports import ReportEngine, classify_stock
from .sales import compute_sale_amount, sell, sell_batch

__all__ = [
    # Engine
    "ProductRegistry",
    "SalesLedger",
    "ReportEngine",
    "classify_stock",
    "compute_sale_amount",
    "sell",
    "sell_batch",
    # Entities
    "Product",
    "ProductField",
    "Sale",
    # Reports
    "InventoryListing",
    "ListingRow",
    "NoSalesReport",
    "ProductDetail",
    "ProfitReport",
    "ProfitReportRow",
    "StockReport",
    "StockReportRow",
    "StockWarning",
    "WarningKind",
    # Operation results
    "LineStatus",
    "RestockLine",
    "SaleLine",
    "SaleReceipt",
    # Errors
    "ErrorKind",
    "InsufficientStockError",
    "InvalidArgumentError",
    "InventoryError",
    "ProductNotFoundError",
    # Caller side
    "InventoryController",
    "InventorySettings",
    "get_settings",
]
