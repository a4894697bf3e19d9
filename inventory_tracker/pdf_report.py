"""PDF exports of the inventory reports, built with reportlab.

Three documents, one per report model:
  1. Stock report (units per product, total, restock warnings)
  2. Profit report (profit per product, highest first, total)
  3. Inventory listing (every field of every product)

Each generator returns the PDF as bytes; ``write_pdf`` puts them on disk.
"""

from __future__ import annotations

import io
import logging
from decimal import Decimal
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    HRFlowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from .models import (
    InventoryListing,
    NoSalesReport,
    ProfitReport,
    StockReport,
    StockWarning,
    WarningKind,
)

logger = logging.getLogger("inventory.pdf")

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------
EMERALD = colors.HexColor("#10b981")
SLATE_900 = colors.HexColor("#0f172a")
SLATE_700 = colors.HexColor("#334155")
SLATE_400 = colors.HexColor("#94a3b8")
LIGHT_BG = colors.HexColor("#f8fafc")

WARNING_COLORS = {
    WarningKind.OUT_OF_STOCK: "#dc2626",
    WarningKind.BELOW_THRESHOLD: "#f59e0b",
}


# ---------------------------------------------------------------------------
# Styles and helpers
# ---------------------------------------------------------------------------
def _build_styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ReportTitle",
            parent=base["Title"],
            fontSize=20,
            textColor=SLATE_900,
            spaceAfter=4,
        ),
        "h2": ParagraphStyle(
            "SectionH2",
            parent=base["Heading2"],
            fontSize=14,
            textColor=SLATE_900,
            spaceBefore=12,
            spaceAfter=8,
        ),
        "subtitle": ParagraphStyle(
            "ReportSubtitle",
            parent=base["Normal"],
            fontSize=10,
            textColor=SLATE_400,
            spaceAfter=12,
        ),
        "body": ParagraphStyle(
            "BodyText",
            parent=base["Normal"],
            fontSize=9,
            textColor=SLATE_700,
            leading=13,
        ),
    }


def _fmt_amount(amount: Decimal, decimals: int = 2) -> str:
    return f"{amount:,.{decimals}f}"


def _make_table(
    data: list[list],
    col_widths: list[float] | None = None,
    totals_row: bool = False,
) -> Table:
    """Header row on dark background, zebra striped body."""
    t = Table(data, colWidths=col_widths, repeatRows=1)
    style_cmds: list[tuple] = [
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#e2e8f0")),
        ("BACKGROUND", (0, 0), (-1, 0), SLATE_900),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ]
    for i in range(2, len(data), 2):
        style_cmds.append(("BACKGROUND", (0, i), (-1, i), LIGHT_BG))
    if totals_row:
        style_cmds.extend([
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("LINEABOVE", (0, -1), (-1, -1), 1, SLATE_900),
        ])
    t.setStyle(TableStyle(style_cmds))
    return t


def _header(story: list, styles: dict, title: str, store_name: str, as_of) -> None:
    story.append(Paragraph(escape(store_name), styles["title"]))
    story.append(Paragraph(title, styles["h2"]))
    story.append(Paragraph(f"Report date: {as_of.isoformat()}", styles["subtitle"]))
    story.append(HRFlowable(
        width="100%", thickness=2, color=EMERALD,
        spaceAfter=12, spaceBefore=4,
    ))


def _warning_markup(warning: StockWarning) -> str:
    """Paragraph markup for one restock warning, in WinAnsi-only text."""
    color = WARNING_COLORS[warning.kind]
    return (
        f'<font color="{color}">&bull;</font> '
        f"<b>{escape(warning.product_name)}</b>: {warning.kind.display_name} "
        f"({warning.available_units} units, threshold {warning.minimum_threshold})"
    )


def _build(story: list, title: str) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=letter,
        title=title,
        topMargin=0.5 * inch,
        bottomMargin=0.5 * inch,
        leftMargin=0.6 * inch,
        rightMargin=0.6 * inch,
    )
    doc.build(story)
    pdf_bytes = buf.getvalue()
    buf.close()
    logger.info("Generated %s PDF: %d pages, %d bytes", title, doc.page, len(pdf_bytes))
    return pdf_bytes


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------
def generate_stock_report_pdf(report: StockReport, store_name: str = "Inventory") -> bytes:
    styles = _build_styles()
    story: list = []
    _header(story, styles, "Stock Report", store_name, report.as_of)

    rows = [["Product name", "Product code", "Available units", "Minimum threshold"]]
    for row in report.rows:
        rows.append([
            row.name,
            row.code,
            str(row.available_units),
            str(row.minimum_threshold),
        ])
    rows.append(["TOTAL", "", str(report.total_units), ""])
    story.append(_make_table(
        rows,
        col_widths=[2.4 * inch, 1.6 * inch, 1.4 * inch, 1.4 * inch],
        totals_row=True,
    ))
    story.append(Spacer(1, 12))

    if report.warnings:
        story.append(Paragraph("Warnings", styles["h2"]))
        for warning in report.warnings:
            story.append(Paragraph(_warning_markup(warning), styles["body"]))

    return _build(story, "Stock Report")


def generate_profit_report_pdf(
    report: ProfitReport | NoSalesReport,
    store_name: str = "Inventory",
    decimals: int = 2,
) -> bytes:
    styles = _build_styles()
    story: list = []
    _header(story, styles, "Sales Report", store_name, report.as_of)

    if isinstance(report, NoSalesReport):
        story.append(Paragraph(report.message, styles["body"]))
        return _build(story, "Sales Report")

    rows = [["Product name", "Total product profits"]]
    for row in report.rows:
        rows.append([row.name, _fmt_amount(row.total_profit, decimals)])
    rows.append(["TOTAL", _fmt_amount(report.total_profit, decimals)])
    story.append(_make_table(
        rows,
        col_widths=[3.4 * inch, 2.6 * inch],
        totals_row=True,
    ))
    return _build(story, "Sales Report")


def generate_listing_pdf(
    listing: InventoryListing,
    store_name: str = "Inventory",
    decimals: int = 2,
) -> bytes:
    styles = _build_styles()
    story: list = []
    _header(story, styles, "Inventory Listing", store_name, listing.as_of)

    if listing.is_empty:
        story.append(Paragraph("The inventory has no items.", styles["body"]))
        return _build(story, "Inventory Listing")

    rows = [["Name", "Category", "Price", "VAT (%)", "Code", "Units", "Threshold"]]
    for row in listing.rows:
        rows.append([
            row.name[:30],
            row.category[:20],
            _fmt_amount(row.sale_price, decimals),
            _fmt_amount(row.vat_percent, 2),
            row.code,
            str(row.available_units),
            str(row.minimum_threshold),
        ])
    story.append(_make_table(
        rows,
        col_widths=[1.6 * inch, 1.1 * inch, 0.8 * inch, 0.7 * inch, 0.9 * inch, 0.6 * inch, 0.7 * inch],
    ))
    return _build(story, "Inventory Listing")


def write_pdf(pdf_bytes: bytes, path: str | Path) -> Path:
    """Write PDF bytes to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(pdf_bytes)
    logger.info("Wrote %s (%d bytes)", path, len(pdf_bytes))
    return path
