"""Exceptions raised by the registry, the ledger and the sell workflow.

Every failure is local to the product being processed. Batch operations
catch these and turn them into per-line results instead of aborting.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    INSUFFICIENT_STOCK = "InsufficientStock"

    @property
    def display_name(self) -> str:
        return {
            ErrorKind.INVALID_ARGUMENT: "Invalid argument",
            ErrorKind.NOT_FOUND: "Not found",
            ErrorKind.INSUFFICIENT_STOCK: "Insufficient stock",
        }[self]


class InventoryError(Exception):
    """Base class for recoverable inventory failures."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, product_name: str | None = None):
        self.product_name = product_name
        super().__init__(message)


class InvalidArgumentError(InventoryError):
    """Non-positive quantity, negative amount or a rejected field value."""

    kind = ErrorKind.INVALID_ARGUMENT


class ProductNotFoundError(InventoryError):
    """No product matches the given name (case-insensitive)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_name: str):
        super().__init__(f"Product not found: {product_name}", product_name)


class InsufficientStockError(InventoryError):
    """Requested units exceed what is on hand, or nothing is on hand."""

    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, product_name: str, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name}: "
            f"{available} available, {requested} requested",
            product_name,
        )
