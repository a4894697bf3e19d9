"""Interactive console menu on top of the InventoryController.

All prompting, retrying on malformed input and printing lives here. Input
and output are injectable so the whole menu can be scripted in tests:

    lines = iter(["9", "0"])
    app = ConsoleApp(controller, input_fn=lambda _: next(lines), output=buffer.append)
    app.run()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from pydantic import ValidationError

from .controller import InventoryController
from .errors import InventoryError
from .models import Product, ProductField
from .rendering import (
    render_listing,
    render_product_detail,
    render_profit_report,
    render_receipt,
    render_restock_lines,
    render_stock_report,
)

logger = logging.getLogger("inventory.console")

MENU = """
===== Inventory =====
1. Register products
2. Remove a product
3. Search a product
4. Update a product
5. Restock products
6. Sell products
7. Stock report
8. Sales report
9. Inventory listing
10. Export reports to PDF
0. Exit"""

EMPTY_INVENTORY = "Error: The inventory has no items."

UPDATE_FIELDS = list(ProductField)


class ConsoleApp:
    def __init__(
        self,
        controller: InventoryController,
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ):
        self.controller = controller
        self._input = input_fn or input
        self._out = output or print
        self._decimals = controller.settings.amount_decimals
        self._actions: dict[int, Callable[[], None]] = {
            1: self.register_products,
            2: self.remove_product,
            3: self.search_product,
            4: self.update_product,
            5: self.restock_products,
            6: self.sell_products,
            7: self.stock_report,
            8: self.sales_report,
            9: self.inventory_listing,
            10: self.export_pdfs,
        }

    def run(self) -> None:
        """Show the menu until the user picks 0 or input runs out."""
        try:
            while True:
                self._out(MENU)
                option = self._ask_int("Option: ", minimum=0, maximum=len(self._actions))
                if option == 0:
                    break
                logger.debug("Menu option %d", option)
                self._actions[option]()
        except EOFError:
            pass
        self._out("Goodbye.")

    # -----------------------------------------------------------------
    # Prompts
    # -----------------------------------------------------------------

    def _ask_text(self, prompt: str, required: bool = True) -> str:
        while True:
            value = self._input(prompt).strip()
            if value or not required:
                return value
            self._out("Error: This field cannot be empty.")

    def _ask_int(
        self,
        prompt: str,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self._out("Error: Please enter a valid number.")
                continue
            if minimum is not None and value < minimum:
                self._out(f"Error: The value must be at least {minimum}.")
                continue
            if maximum is not None and value > maximum:
                self._out(f"Please enter a number between {minimum or 0} and {maximum}.")
                continue
            return value

    def _ask_decimal(self, prompt: str, positive: bool = False) -> Decimal:
        while True:
            raw = self._input(prompt).strip()
            try:
                value = Decimal(raw)
            except InvalidOperation:
                self._out("Error: Please enter a valid number.")
                continue
            if not value.is_finite():
                self._out("Error: Please enter a valid number.")
                continue
            if positive and value <= 0:
                self._out("Error: You cannot enter negative quantities or equal to zero.")
                continue
            if value < 0:
                self._out("Error: You cannot enter negative quantities.")
                continue
            return value

    def _guard_not_empty(self) -> bool:
        if self.controller.inventory_is_empty():
            self._out(EMPTY_INVENTORY)
            return False
        return True

    # -----------------------------------------------------------------
    # Catalog
    # -----------------------------------------------------------------

    def _ask_product(self, index: int) -> Product:
        self._out(f"Product #{index}")
        while True:
            name = self._ask_text("Enter the product name: ")
            category = self._ask_text("Enter its category (e.g., accessory, electronics...): ", required=False)
            price = self._ask_decimal("Enter the price of this product: ", positive=True)
            vat = self._ask_decimal("Enter the VAT percentage of the product: ")
            code = self._ask_text("Enter the product code: ", required=False)
            units = self._ask_int("Enter the product units: ", minimum=1)
            threshold = self._ask_int("Enter the minimum threshold to restock the product: ", minimum=0)
            try:
                return Product(
                    name=name,
                    category=category,
                    sale_price=price,
                    vat_percent=vat,
                    code=code,
                    available_units=units,
                    minimum_threshold=threshold,
                )
            except ValidationError as e:
                self._out(f"Error: {e.errors()[0]['msg']}. Please enter the product again.")

    def register_products(self) -> None:
        count = self._ask_int("How many products do you want to register? ", minimum=1)
        products = [self._ask_product(i + 1) for i in range(count)]
        self.controller.register(products)
        self._out(f"{count} product(s) registered.")

    def remove_product(self) -> None:
        if not self._guard_not_empty():
            return
        name = self._ask_text("Enter the name of the product to remove: ")
        if self.controller.remove(name):
            self._out("Product removed successfully.")
        else:
            self._out("Product not found.")

    def search_product(self) -> None:
        if not self._guard_not_empty():
            return
        name = self._ask_text("Enter the name of the product to search: ")
        detail = self.controller.product_detail(name)
        if detail is None:
            self._out("Product not found.")
            return
        self._out(render_product_detail(detail, self._decimals))

    def update_product(self) -> None:
        if not self._guard_not_empty():
            return
        name = self._ask_text("Enter the product name to update: ")
        if self.controller.find(name) is None:
            self._out("Product not found.")
            return

        self._out("What do you want to update?")
        for i, field in enumerate(UPDATE_FIELDS, start=1):
            self._out(f"{i}. {field.display_name}")
        option = self._ask_int("Option: ", minimum=1, maximum=len(UPDATE_FIELDS))
        field = UPDATE_FIELDS[option - 1]

        prompt = f"Type the new {field.display_name.lower()} for the product: "
        if field is ProductField.SALE_PRICE:
            value = self._ask_decimal(prompt, positive=True)
        elif field is ProductField.VAT_PERCENT:
            value = self._ask_decimal(prompt)
        elif field is ProductField.MINIMUM_THRESHOLD:
            value = self._ask_int(prompt, minimum=0)
        else:
            value = self._ask_text(prompt)

        try:
            self.controller.update(name, field, value)
        except InventoryError as e:
            self._out(f"Error: {e}")
            return
        self._out("Product updated successfully.")

    # -----------------------------------------------------------------
    # Stock movements
    # -----------------------------------------------------------------

    def restock_products(self) -> None:
        if not self._guard_not_empty():
            return
        count = self._ask_int("How many products are you going to restock? ", minimum=1)
        orders: list[tuple[str, int]] = []
        for _ in range(count):
            name = self._ask_text("What product are you going to restock? ")
            units = self._ask_int("How many units are you going to add? ", minimum=1)
            orders.append((name, units))
        self._out(render_restock_lines(self.controller.restock_batch(orders)))

    def sell_products(self) -> None:
        if not self._guard_not_empty():
            return
        count = self._ask_int("How many different products are you going to sell? ", minimum=1)
        orders: list[tuple[str, int]] = []
        for i in range(count):
            self._out(f"Product #{i + 1}")
            name = self._ask_text("Enter the product name: ")
            units = self._ask_int("Enter the quantity of units to buy: ", minimum=1)
            orders.append((name, units))
        receipt = self.controller.sell_batch(orders)
        self._out(render_receipt(receipt, self._decimals))

    # -----------------------------------------------------------------
    # Reports
    # -----------------------------------------------------------------

    def stock_report(self) -> None:
        if not self._guard_not_empty():
            return
        self._out(render_stock_report(self.controller.stock_report()))

    def sales_report(self) -> None:
        self._out(render_profit_report(self.controller.profit_report(), self._decimals))

    def inventory_listing(self) -> None:
        if not self._guard_not_empty():
            return
        self._out(render_listing(self.controller.full_listing(), self._decimals))

    def export_pdfs(self) -> None:
        try:
            paths = [
                self.controller.export_stock_report_pdf(),
                self.controller.export_profit_report_pdf(),
                self.controller.export_listing_pdf(),
            ]
        except OSError as e:
            logger.error("PDF export failed: %s", e)
            self._out(f"Error: Could not write the PDF reports ({e}).")
            return
        for path in paths:
            self._out(f"Saved {path}")
