"""Product registry: the owner of every Product in the inventory.

Products are kept in insertion order for listings and indexed by their
casefolded name for lookups. At most one product per case-insensitive
name exists at any time; registering a duplicate merges its units into
the existing entry.

``find`` hands out the registry's own objects, so a product can be renamed
without the index knowing. Lookups check the hit against the product's
current name and rebuild the index when the two disagree.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from .errors import (
    InsufficientStockError,
    InvalidArgumentError,
    ProductNotFoundError,
)
from .models import Product, ProductField, name_key


class ProductRegistry:
    """In-memory product catalog with stock levels.

    Usage:
        registry = ProductRegistry()
        registry.register([Product(name="Widget", sale_price="10", available_units=5)])
        registry.restock("widget", 3)
        registry.adjust_stock_for_sale("WIDGET", 2)
    """

    def __init__(self):
        self._products: list[Product] = []
        self._index: dict[str, Product] = {}
        self._lock = threading.RLock()

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def is_empty(self) -> bool:
        return not self._products

    def products(self) -> list[Product]:
        """Snapshot of the registered products in insertion order."""
        with self._lock:
            return list(self._products)

    def find(self, name: str) -> Product | None:
        """Case-insensitive lookup. Returns the registry's own object."""
        with self._lock:
            return self._lookup(name_key(name))

    def total_units(self) -> int:
        with self._lock:
            return sum(p.available_units for p in self._products)

    # -----------------------------------------------------------------
    # Mutations
    # -----------------------------------------------------------------

    def register(self, products: Iterable[Product]) -> None:
        """Add new products, merging units into existing same-name entries."""
        with self._lock:
            for candidate in products:
                existing = self._lookup(candidate.key)
                if existing is not None:
                    existing.available_units += candidate.available_units
                    continue
                self._products.append(candidate)
                self._index[candidate.key] = candidate

    def remove(self, name: str) -> bool:
        """Remove the product called ``name``. Returns False if absent."""
        with self._lock:
            product = self._lookup(name_key(name))
            if product is None:
                return False
            del self._index[product.key]
            self._products = [p for p in self._products if p is not product]
            return True

    def restock(self, name: str, units: int) -> Product:
        if units <= 0:
            raise InvalidArgumentError(
                f"Restock quantity must be positive, got {units}", name
            )
        with self._lock:
            product = self._require(name)
            product.available_units += units
            return product

    def adjust_stock_for_sale(self, name: str, units: int) -> Product:
        """Take ``units`` out of stock for a sale.

        The availability check and the decrement run under the same lock,
        so two concurrent sellers cannot both pass the check.

        Raises:
            InvalidArgumentError: units is zero or negative.
            ProductNotFoundError: no product called ``name``.
            InsufficientStockError: nothing on hand, or fewer than ``units``.
        """
        if units <= 0:
            raise InvalidArgumentError(
                f"Sale quantity must be positive, got {units}", name
            )
        with self._lock:
            product = self._require(name)
            available = product.available_units
            if available == 0 or units > available:
                raise InsufficientStockError(product.name, units, available)
            product.available_units = available - units
            return product

    def update(self, name: str, field: ProductField | str, new_value: Any) -> Product:
        """Change one descriptive field of a product.

        ``available_units`` is deliberately not updatable here; it moves
        only through restock and sale.
        """
        try:
            field = ProductField(field)
        except ValueError:
            raise InvalidArgumentError(f"Unknown product field: {field}", name) from None

        with self._lock:
            product = self._require(name)

            if field is ProductField.NAME:
                new_key = name_key(str(new_value))
                clash = self._lookup(new_key)
                if clash is not None and clash is not product:
                    raise InvalidArgumentError(
                        f"Another product is already called {clash.name}", name
                    )

            try:
                setattr(product, field.value, new_value)
            except ValidationError as e:
                raise InvalidArgumentError(
                    f"Invalid value for {field.value}: {new_value!r} "
                    f"({e.errors()[0]['msg']})",
                    name,
                ) from e

            if field is ProductField.NAME:
                self._reindex()
            return product

    # -----------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------

    def _reindex(self) -> None:
        self._index = {p.key: p for p in self._products}

    def _lookup(self, key: str) -> Product | None:
        """Index lookup; callers hold the lock."""
        product = self._index.get(key)
        if product is not None and product.key == key:
            return product
        if any(p.key != k for k, p in self._index.items()):
            self._reindex()
            return self._index.get(key)
        return None

    def _require(self, name: str) -> Product:
        product = self._lookup(name_key(name))
        if product is None:
            raise ProductNotFoundError(name)
        return product
