"""Sell workflow: stock decrement, sale amount, ledger update.

A multi-item sale is a sequence of independent steps. If one item fails
(unknown product, not enough stock, bad quantity) the items already sold
stay sold and the remaining items are still attempted.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .errors import InventoryError
from .ledger import SalesLedger
from .models import LineStatus, Product, SaleLine, SaleReceipt
from .registry import ProductRegistry

HUNDRED = Decimal("100")


def compute_sale_amount(product: Product, units: int) -> Decimal:
    """VAT-inclusive revenue: price * units * (100 + vat%) / 100."""
    return product.sale_price * units * (HUNDRED + product.vat_percent) / HUNDRED


def sell(
    registry: ProductRegistry,
    ledger: SalesLedger,
    product_name: str,
    units: int,
) -> SaleLine:
    """Sell ``units`` of one product.

    Raises:
        InventoryError: any of the registry's sale errors. Nothing is
            recorded in the ledger when this happens.
    """
    product = registry.adjust_stock_for_sale(product_name, units)
    amount = compute_sale_amount(product, units)
    ledger.record_sale(product.name, amount)
    return SaleLine(
        product_name=product.name,
        units=units,
        status=LineStatus.OK,
        amount=amount,
    )


def sell_batch(
    registry: ProductRegistry,
    ledger: SalesLedger,
    orders: Iterable[tuple[str, int]],
) -> SaleReceipt:
    """Sell several products, one independent step per ``(name, units)``."""
    receipt = SaleReceipt()
    for product_name, units in orders:
        try:
            line = sell(registry, ledger, product_name, units)
        except InventoryError as e:
            line = SaleLine(
                product_name=product_name,
                units=units,
                status=LineStatus.FAILED,
                error_kind=e.kind,
                message=str(e),
            )
        receipt.lines.append(line)
    return receipt
