"""Tests for SalesLedger: accumulation, merge by name, profit ranking."""

from decimal import Decimal

import pytest
from inventory_tracker.errors import InvalidArgumentError
from inventory_tracker.ledger import SalesLedger


@pytest.fixture
def ledger() -> SalesLedger:
    return SalesLedger()


class TestRecordSale:
    def test_starts_empty(self, ledger):
        assert ledger.is_empty()
        assert ledger.entries() == []
        assert ledger.total_profit() == Decimal("0")

    def test_first_sale_creates_entry(self, ledger):
        sale = ledger.record_sale("Widget", Decimal("33.0"))
        assert sale.product_name == "Widget"
        assert sale.total_profit == Decimal("33.0")
        assert len(ledger) == 1

    def test_same_name_accumulates(self, ledger):
        ledger.record_sale("Widget", Decimal("33.0"))
        ledger.record_sale("WIDGET", Decimal("11.5"))

        entries = ledger.entries()
        assert len(entries) == 1
        assert entries[0].product_name == "Widget"
        assert entries[0].total_profit == Decimal("44.5")

    def test_float_amounts_converted_exactly(self, ledger):
        ledger.record_sale("Widget", 0.1)
        ledger.record_sale("Widget", 0.2)
        assert ledger.find("widget").total_profit == Decimal("0.3")

    def test_zero_amount_allowed(self, ledger):
        ledger.record_sale("Widget", 0)
        assert ledger.find("Widget").total_profit == Decimal("0")

    def test_negative_amount_rejected(self, ledger):
        with pytest.raises(InvalidArgumentError):
            ledger.record_sale("Widget", Decimal("-1"))
        assert ledger.is_empty()

    @pytest.mark.parametrize(
        "amount", ["abc", "", float("nan"), float("inf"), Decimal("NaN"), Decimal("-Infinity")]
    )
    def test_non_numeric_amount_rejected(self, ledger, amount):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ledger.record_sale("Widget", amount)
        assert exc_info.value.product_name == "Widget"
        assert ledger.is_empty()

    def test_find_missing(self, ledger):
        assert ledger.find("Widget") is None


class TestRanking:
    def test_sorted_by_profit_descending(self, ledger):
        ledger.record_sale("Low", 5)
        ledger.record_sale("High", 50)
        ledger.record_sale("Mid", 20)
        assert [s.product_name for s in ledger.entries()] == ["High", "Mid", "Low"]

    def test_update_moves_entry_up(self, ledger):
        ledger.record_sale("A", 10)
        ledger.record_sale("B", 20)
        ledger.record_sale("A", 15)
        assert [s.product_name for s in ledger.entries()] == ["A", "B"]

    def test_ties_keep_insertion_order(self, ledger):
        ledger.record_sale("A", 5)
        ledger.record_sale("B", 10)
        ledger.record_sale("C", 10)
        # A catches up with B and C; it was sold first so it leads the tie
        ledger.record_sale("a", 5)
        assert [s.product_name for s in ledger.entries()] == ["A", "B", "C"]

    def test_total_profit(self, ledger):
        ledger.record_sale("A", Decimal("1.25"))
        ledger.record_sale("B", Decimal("2.50"))
        ledger.record_sale("A", Decimal("0.25"))
        assert ledger.total_profit() == Decimal("4.00")

    def test_entries_are_copies(self, ledger):
        ledger.record_sale("A", 10)
        ledger.record_sale("B", 5)
        ledger.entries()[1].total_profit = Decimal("100")
        assert [s.product_name for s in ledger.entries()] == ["A", "B"]
        assert ledger.find("B").total_profit == Decimal("5")
