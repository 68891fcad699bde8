from decimal import Decimal

import pytest

from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import InvalidOperand, MalformedDecimal
from decimal_money.utils.decimal_tools import as_decimal, as_decimal_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, "5"),
        (-5, "-5"),
        (1.5, "1.5"),
        (0.1 + 0.2, "0.3"),
        ("2.50", "2.5"),
        (Decimal("1E+2"), "100"),
        (Decimal("-0.010"), "-0.01"),
        (DecimalValue("3", "14"), "3.14"),
    ],
)
def test_as_decimal_value(value, expected):
    assert str(as_decimal_value(value)) == expected


@pytest.mark.parametrize("value", [True, False, None, [1], {"a": 1}, float("nan"), float("-inf"), Decimal("NaN"), Decimal("Infinity")])
def test_as_decimal_value_rejects_non_numeric(value):
    with pytest.raises(InvalidOperand):
        as_decimal_value(value)


def test_as_decimal_value_rejects_malformed_string():
    with pytest.raises(MalformedDecimal):
        as_decimal_value("12a")


def test_as_decimal():
    assert as_decimal("1.50") == Decimal("1.5")
    assert as_decimal(0.1 + 0.2) == Decimal("0.3")
