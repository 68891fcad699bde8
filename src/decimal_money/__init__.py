__version__ = "0.0.1"

from decimal_money.domain.monetary.money import Money
from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import DecimalMoneyError, DivisionByZero, InvalidOperand, MalformedDecimal, UnknownRoundingMode
from decimal_money.domain.number.rounding_mode import RoundingMode

__all__ = [
    "DecimalMoneyError",
    "DecimalValue",
    "DivisionByZero",
    "InvalidOperand",
    "MalformedDecimal",
    "Money",
    "RoundingMode",
    "UnknownRoundingMode",
]
