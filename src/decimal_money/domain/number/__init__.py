"""Exact decimal numbers, rounding modes and the errors of the decimal engine."""

from decimal_money.domain.number.errors import DecimalMoneyError, DivisionByZero, InvalidOperand, MalformedDecimal, UnknownRoundingMode
from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.rounding_mode import RoundingMode

__all__ = [
    "DecimalMoneyError",
    "DecimalValue",
    "DivisionByZero",
    "InvalidOperand",
    "MalformedDecimal",
    "RoundingMode",
    "UnknownRoundingMode",
]
