from decimal import Decimal

import pytest

from loja.utils.money import format_brl, to_decimal


class TestToDecimal:
    def test_float_keeps_written_value(self):
        assert to_decimal(89.90) == Decimal("89.9")
        assert to_decimal(89.90) + to_decimal(299.90) == Decimal("389.8")

    def test_string_and_int(self):
        assert to_decimal("159.90") == Decimal("159.90")
        assert to_decimal(10) == Decimal("10")

    def test_decimal_passthrough(self):
        value = Decimal("1.23")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["abc", "", True, None])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)


def test_format_brl():
    assert format_brl(Decimal("399.8")) == "R$ 399.80"
    assert format_brl(Decimal("10.0")) == "R$ 10.00"
