"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from soletrack.domain.exceptions import ValidationError
from soletrack.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("12500")
        assert m.amount == Decimal("12500")

    def test_of_factory_from_float(self):
        assert Money.of(99.5) == Money.of("99.5")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("NaN"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("12500") * 3 == Money.of("37500")

    def test_division_rounds_to_cents(self):
        assert Money.of("10") / 3 == Money.of("3.33")

    def test_division_by_zero_rejected(self):
        with pytest.raises(ValidationError):
            Money.of("10") / 0

    def test_format_with_symbol(self):
        assert Money.of("12500").format("₹") == "₹12,500.00"
        assert str(Money.of("9.5")) == "9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)
