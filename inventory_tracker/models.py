"""Pydantic models shared by the engine, the renderers and the console.

Product and Sale are the two mutable entities; they validate on
assignment so an in-place update can never leave a negative price or
stock level behind. Everything else here is a read-only projection
produced by the report engine or the sell workflow.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorKind


def name_key(name: str) -> str:
    """Case-insensitive identity key for product and sale names."""
    return name.strip().casefold()


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """A catalog item together with its stock state."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    category: str = ""
    sale_price: Decimal = Field(gt=0)
    vat_percent: Decimal = Field(default=Decimal("0"), ge=0)
    code: str = ""
    available_units: int = Field(default=0, ge=0)
    minimum_threshold: int = Field(default=0, ge=0)

    @property
    def key(self) -> str:
        return name_key(self.name)

    @property
    def is_out_of_stock(self) -> bool:
        return self.available_units == 0

    @property
    def is_below_threshold(self) -> bool:
        return self.available_units <= self.minimum_threshold


class ProductField(str, Enum):
    """Fields that ``ProductRegistry.update`` may change."""

    NAME = "name"
    CATEGORY = "category"
    CODE = "code"
    SALE_PRICE = "sale_price"
    VAT_PERCENT = "vat_percent"
    MINIMUM_THRESHOLD = "minimum_threshold"

    @property
    def display_name(self) -> str:
        return {
            ProductField.NAME: "Name of the product",
            ProductField.CATEGORY: "Category",
            ProductField.CODE: "Code",
            ProductField.SALE_PRICE: "Price",
            ProductField.VAT_PERCENT: "VAT",
            ProductField.MINIMUM_THRESHOLD: "Minimum threshold",
        }[self]


class Sale(BaseModel):
    """Accumulated VAT-inclusive revenue for one product name."""

    model_config = ConfigDict(validate_assignment=True)

    product_name: str = Field(min_length=1)
    total_profit: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def key(self) -> str:
        return name_key(self.product_name)


# ---------------------------------------------------------------------------
# Stock report
# ---------------------------------------------------------------------------


class WarningKind(str, Enum):
    OUT_OF_STOCK = "OutOfStock"
    BELOW_THRESHOLD = "BelowThreshold"

    @property
    def display_name(self) -> str:
        return {
            WarningKind.OUT_OF_STOCK: "Out of stock",
            WarningKind.BELOW_THRESHOLD: "Below minimum threshold",
        }[self]


class StockWarning(BaseModel):
    product_name: str
    kind: WarningKind
    available_units: int
    minimum_threshold: int


class StockReportRow(BaseModel):
    name: str
    code: str
    available_units: int
    minimum_threshold: int


class StockReport(BaseModel):
    """Units on hand per product, with restock warnings."""

    as_of: date
    rows: list[StockReportRow] = Field(default_factory=list)
    total_units: int = 0
    warnings: list[StockWarning] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def warnings_of(self, kind: WarningKind) -> list[StockWarning]:
        return [w for w in self.warnings if w.kind == kind]


# ---------------------------------------------------------------------------
# Profit report
# ---------------------------------------------------------------------------


class ProfitReportRow(BaseModel):
    name: str
    total_profit: Decimal


class ProfitReport(BaseModel):
    """Per-product profit in ledger order (highest first)."""

    as_of: date
    rows: list[ProfitReportRow]
    total_profit: Decimal


class NoSalesReport(BaseModel):
    """Returned instead of a ProfitReport when nothing has been sold yet."""

    as_of: date
    message: str = "There hasn't been any sales made."


# ---------------------------------------------------------------------------
# Listing / search
# ---------------------------------------------------------------------------


class ListingRow(BaseModel):
    name: str
    category: str
    sale_price: Decimal
    vat_percent: Decimal
    code: str
    available_units: int
    minimum_threshold: int


class InventoryListing(BaseModel):
    as_of: date
    rows: list[ListingRow] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


class ProductDetail(BaseModel):
    """Search result shown for a single product."""

    name: str
    category: str
    sale_price: Decimal
    available_units: int


# ---------------------------------------------------------------------------
# Operation results
# ---------------------------------------------------------------------------


class LineStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"


class SaleLine(BaseModel):
    """Outcome of selling one product inside a (possibly multi-item) sale."""

    product_name: str
    units: int
    status: LineStatus
    amount: Decimal | None = None
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == LineStatus.OK


class SaleReceipt(BaseModel):
    lines: list[SaleLine] = Field(default_factory=list)

    @property
    def sold_lines(self) -> list[SaleLine]:
        return [line for line in self.lines if line.succeeded]

    @property
    def failed_lines(self) -> list[SaleLine]:
        return [line for line in self.lines if not line.succeeded]

    @property
    def total_amount(self) -> Decimal:
        """VAT-inclusive total of the lines that went through."""
        return sum((line.amount for line in self.sold_lines), Decimal("0"))


class RestockLine(BaseModel):
    product_name: str
    units: int
    status: LineStatus
    available_units: int | None = None
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == LineStatus.OK
