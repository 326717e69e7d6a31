"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import StockExceededError, ValidationError
from shopcart.domain.model.stock import StockRecord
from shopcart.domain.model.value_objects import Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_of_float_keeps_decimal_digits(self):
        assert Money.of(9.99).amount == Decimal("9.99")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_invalid_string_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Money.of(True)

    def test_multiplication(self):
        assert Money.of("2.50") * 4 == Money.of("10")

    def test_str_formats_two_decimals(self):
        assert str(Money.of("179.9")) == "$179.90"

    def test_to_number(self):
        assert Money.of(9.99).to_number() == 9.99
        assert Money.of(10).to_number() == 10
        assert isinstance(Money.of(10).to_number(), int)


# ── StockRecord ──────────────────────────────────────────────────────────────


class TestStockRecord:

    def test_request_within_stock_passes(self):
        StockRecord(id=1, amount=2).ensure_available(2)

    def test_request_above_stock_raises(self):
        with pytest.raises(StockExceededError) as info:
            StockRecord(id=1, amount=2).ensure_available(3)
        assert info.value.requested == 3
        assert info.value.available == 2

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockRecord(id=1, amount=-1)
