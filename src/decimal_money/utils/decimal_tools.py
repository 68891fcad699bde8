from __future__ import annotations

import math
from decimal import Decimal
from typing import TypeAlias

from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import InvalidOperand

# Use where a number may arrive as any of these types (normalized by `as_decimal_value`)
NumberLike: TypeAlias = DecimalValue | Decimal | int | float | str


def as_decimal_value(value: NumberLike) -> DecimalValue:
    """Convert any supported numeric type into DecimalValue.

    This is the only place where operand types are checked, so calculator and money
    operations do not re-implement the same logic.

    Args:
        value: DecimalValue, Decimal, int, float or decimal string.

    Returns:
        Value converted to DecimalValue.

    Raises:
        InvalidOperand: If $value is not numeric (bool, None, NaN, infinity, other types).
        MalformedDecimal: If $value is a string that does not follow the digit grammar.
    """
    if isinstance(value, DecimalValue):
        return value

    # Raise: bool is an int subclass, but not a number here
    if isinstance(value, bool):
        raise InvalidOperand(value)

    if isinstance(value, int):
        return DecimalValue.from_int(value)

    if isinstance(value, float):
        # Raise: NaN and infinity have no digit representation
        if not math.isfinite(value):
            raise InvalidOperand(value)
        return DecimalValue.from_float(value)

    if isinstance(value, Decimal):
        # Raise: NaN and infinity have no digit representation
        if not value.is_finite():
            raise InvalidOperand(value)
        return DecimalValue.from_string(format(value, "f"))

    if isinstance(value, str):
        return DecimalValue.from_string(value)

    raise InvalidOperand(value)


def as_decimal(value: NumberLike) -> Decimal:
    """Convert any supported numeric type into Decimal, validating it through DecimalValue.

    Args:
        value: Input value as `NumberLike`.

    Returns:
        Value converted to Decimal.
    """
    return Decimal(str(as_decimal_value(value)))
