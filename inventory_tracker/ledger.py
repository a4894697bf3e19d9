"""Sales ledger: accumulated profit per product, ranked highest first."""

from __future__ import annotations

import threading
from decimal import Decimal, InvalidOperation

from .errors import InvalidArgumentError
from .models import Sale, name_key


def _to_decimal(amount: Decimal | int | float | str, product_name: str) -> Decimal:
    try:
        # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise InvalidArgumentError(
            f"Sale amount is not a number: {amount!r}", product_name
        ) from None
    if not value.is_finite():
        raise InvalidArgumentError(
            f"Sale amount must be finite, got {amount!r}", product_name
        )
    return value


class SalesLedger:
    """One Sale entry per case-insensitive product name.

    Entries are never removed, even when the product leaves the registry.
    After every write the ranking is rebuilt with a stable sort over the
    insertion-ordered entries, so equal profits keep the order in which
    their products were first sold.
    """

    def __init__(self):
        self._by_name: dict[str, Sale] = {}
        self._ranked: list[Sale] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._by_name)

    def is_empty(self) -> bool:
        return not self._by_name

    def record_sale(self, product_name: str, amount: Decimal | int | float | str) -> Sale:
        """Add ``amount`` to the product's running profit."""
        amount = _to_decimal(amount, product_name)
        if amount < 0:
            raise InvalidArgumentError(
                f"Sale amount cannot be negative, got {amount}", product_name
            )

        with self._lock:
            key = name_key(product_name)
            sale = self._by_name.get(key)
            if sale is None:
                sale = Sale(product_name=product_name, total_profit=amount)
                self._by_name[key] = sale
            else:
                sale.total_profit += amount
            self._ranked = sorted(
                self._by_name.values(), key=lambda s: s.total_profit, reverse=True
            )
            return sale.model_copy()

    def entries(self) -> list[Sale]:
        """Copies of all entries, highest profit first."""
        with self._lock:
            return [sale.model_copy() for sale in self._ranked]

    def find(self, product_name: str) -> Sale | None:
        with self._lock:
            sale = self._by_name.get(name_key(product_name))
            return sale.model_copy() if sale is not None else None

    def total_profit(self) -> Decimal:
        with self._lock:
            return sum((s.total_profit for s in self._ranked), Decimal("0"))
