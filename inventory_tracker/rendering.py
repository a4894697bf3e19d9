"""Plain-text rendering of reports for the console.

Fixed-width tables, one function per report model. The output is what the
shell prints; nothing here touches the registry or the ledger.
"""

from __future__ import annotations

from decimal import Decimal

from .models import (
    InventoryListing,
    NoSalesReport,
    ProductDetail,
    ProfitReport,
    RestockLine,
    SaleReceipt,
    StockReport,
    WarningKind,
)


def format_amount(amount: Decimal, decimals: int = 2) -> str:
    """Fixed-point amount, e.g. ``33.00``."""
    return f"{amount:.{decimals}f}"


def _date_line(as_of) -> str:
    return f"Report date: {as_of.isoformat()}"


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def render_stock_report(report: StockReport) -> str:
    lines = [
        _date_line(report.as_of),
        f"{'Product name':<25} {'Product code':<20} {'Available units':<22} {'Minimum threshold':<15}",
    ]
    for row in report.rows:
        lines.append(
            f"{row.name:<25} {row.code:<20} {row.available_units:<22d} {row.minimum_threshold:<15d}"
        )
    lines.append(f"Total quantity of products: {report.total_units}")

    for warning in report.warnings:
        if warning.kind == WarningKind.OUT_OF_STOCK:
            lines.append(f'Warning! The product "{warning.product_name}" has 0 available units.')
        else:
            lines.append(
                f'Warning! The product "{warning.product_name}" is below the minimum threshold.'
            )
    return "\n".join(lines)


def render_profit_report(report: ProfitReport | NoSalesReport, decimals: int = 2) -> str:
    if isinstance(report, NoSalesReport):
        return report.message

    lines = [
        _date_line(report.as_of),
        f"{'Product name':<26} {'Total product profits':<30}",
    ]
    for row in report.rows:
        lines.append(f"{row.name:<26} {format_amount(row.total_profit, decimals):<30}")
    lines.append(f"Total profits: {format_amount(report.total_profit, decimals)}")
    return "\n".join(lines)


def render_listing(listing: InventoryListing, decimals: int = 2) -> str:
    lines = [
        _date_line(listing.as_of),
        f"{'Name':<20} {'Category':<15} {'Price':<12} {'VAT (%)':<10} "
        f"{'Code':<12} {'Units':<10} {'Threshold':<10}",
    ]
    for row in listing.rows:
        lines.append(
            f"{row.name:<20} {row.category:<15} "
            f"{format_amount(row.sale_price, decimals):<12} "
            f"{format_amount(row.vat_percent, 2):<10} "
            f"{row.code:<12} {row.available_units:<10d} {row.minimum_threshold:<10d}"
        )
    return "\n".join(lines)


def render_product_detail(detail: ProductDetail, decimals: int = 2) -> str:
    return "\n".join(
        [
            "Product found:",
            f"Name: {detail.name}",
            f"Category: {detail.category}",
            f"Price: {format_amount(detail.sale_price, decimals)}",
            f"Available units: {detail.available_units}",
        ]
    )


# ---------------------------------------------------------------------------
# Operation results
# ---------------------------------------------------------------------------


def render_receipt(receipt: SaleReceipt, decimals: int = 2) -> str:
    """Per-line outcome plus the VAT-inclusive total of what was sold."""
    lines: list[str] = []
    for line in receipt.lines:
        if line.succeeded:
            lines.append(
                f"Sold {line.units} x {line.product_name}: "
                f"{format_amount(line.amount, decimals)}"
            )
        else:
            lines.append(f"Error: {line.message}")

    if receipt.sold_lines:
        lines.append(
            "The total cost of this purchase (VAT included) is: "
            f"{format_amount(receipt.total_amount, decimals)}"
        )
    return "\n".join(lines)


def render_restock_lines(results: list[RestockLine]) -> str:
    lines: list[str] = []
    for result in results:
        if result.succeeded:
            lines.append(
                f"Restocked {result.product_name}: {result.available_units} units available."
            )
        else:
            lines.append(f"Error: {result.message}")
    return "\n".join(lines)
