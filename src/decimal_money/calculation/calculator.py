"""Arbitrary-precision arithmetic over decimal strings at a fixed working scale.

All functions are pure: each builds a local `decimal` context sized from its operands,
so results are exact up to the working scale and the global decimal context is never
touched. Results at working scale are truncated toward zero, not rounded.
"""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_DOWN

from decimal_money.calculation.rounding_engine import round_to_integer
from decimal_money.config import WORKING_SCALE
from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import DivisionByZero, MalformedDecimal
from decimal_money.domain.number.rounding_mode import RoundingMode
from decimal_money.utils.decimal_tools import NumberLike, as_decimal_value


# region Comparison


def compare(a: NumberLike, b: NumberLike, scale: int = WORKING_SCALE) -> int:
    """Compare two numbers after truncating both to $scale fractional digits.

    Returns:
        -1 if $a < $b, 0 if equal, 1 if $a > $b. Different renderings of the same
        value ("1" and "1.0") compare equal.
    """
    left, right, context = _operands(a, b, scale)
    left = _truncate(left, scale, context)
    right = _truncate(right, scale, context)

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


# endregion

# region Arithmetic


def add(amount: NumberLike, addend: NumberLike, scale: int = WORKING_SCALE) -> str:
    """Add at $scale and strip trailing zeros from the result."""
    left, right, context = _operands(amount, addend, scale)
    return str(DecimalValue.from_string(_render(context.add(left, right), scale, context)))


def subtract(amount: NumberLike, subtrahend: NumberLike, scale: int = WORKING_SCALE) -> str:
    """Subtract at $scale and strip trailing zeros from the result."""
    left, right, context = _operands(amount, subtrahend, scale)
    return str(DecimalValue.from_string(_render(context.subtract(left, right), scale, context)))


def multiply(amount: NumberLike, multiplier: NumberLike, scale: int = WORKING_SCALE) -> str:
    """Multiply and render the product with exactly $scale fractional digits.

    Args:
        amount: Multiplicand.
        multiplier: int, float, Decimal or decimal string.
        scale: Fractional digits of the result.

    Returns:
        Product such as "1.50000000000000" for ("1", 1.5).
    """
    left, right, context = _operands(amount, multiplier, scale)
    return _render(context.multiply(left, right), scale, context)


def divide(amount: NumberLike, divisor: NumberLike, scale: int = WORKING_SCALE) -> str:
    """Divide and render the quotient with exactly $scale fractional digits.

    Args:
        amount: Dividend.
        divisor: int, float, Decimal or decimal string.
        scale: Fractional digits of the result.

    Returns:
        Quotient truncated to $scale, e.g. "10.64705882352941" for ("181", 17).

    Raises:
        DivisionByZero: If $divisor normalizes to zero.
    """
    left, right, context = _operands(amount, divisor, scale)

    # Raise: divisor must not be zero
    if right.is_zero():
        raise DivisionByZero(amount)

    return _render(context.divide(left, right), scale, context)


def mod(amount: NumberLike, divisor: NumberLike) -> str:
    """Integer remainder of $amount / $divisor; the sign follows the dividend.

    This is truncated-division remainder, not mathematical modulo:
    mod("-13", "5") == "-3" and mod("13", "-5") == "3". Both operands must be integers;
    "13.0" counts as one, "13.5" does not.

    Raises:
        MalformedDecimal: If $amount or $divisor has a fractional part.
        DivisionByZero: If $divisor normalizes to zero.
    """
    # Raise: remainder is defined on integer operands only
    for operand in (amount, divisor):
        if not as_decimal_value(operand).is_integer:
            raise MalformedDecimal(operand, "mod requires integer operands")

    left, right, context = _operands(amount, divisor, 0)

    # Raise: divisor must not be zero
    if right.is_zero():
        raise DivisionByZero(amount)

    return _render(context.remainder(left, right), 0, context)


# endregion

# region Integer rounding


def ceil(number: NumberLike) -> str:
    """Smallest integer >= $number."""
    return round_to_integer(as_decimal_value(number), RoundingMode.UP)


def floor(number: NumberLike) -> str:
    """Largest integer <= $number."""
    return round_to_integer(as_decimal_value(number), RoundingMode.DOWN)


def absolute(number: NumberLike) -> str:
    """Strip the leading '-' without doing any arithmetic."""
    return str(number).lstrip("-")


# endregion

# region Helpers


def _operands(a: NumberLike, b: NumberLike, scale: int) -> tuple[Decimal, Decimal, Context]:
    a_text = str(as_decimal_value(a))
    b_text = str(as_decimal_value(b))

    # Precision large enough for exact results at $scale
    precision = len(a_text) + len(b_text) + scale + 2
    context = Context(prec=precision, rounding=ROUND_DOWN)
    return Decimal(a_text), Decimal(b_text), context


def _truncate(value: Decimal, scale: int, context: Context) -> Decimal:
    result = value.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_DOWN, context=context)

    # A negative value truncated to zero renders as "0", never "-0"
    if result.is_zero():
        return result.copy_abs()
    return result


def _render(value: Decimal, scale: int, context: Context) -> str:
    return format(_truncate(value, scale, context), "f")


# endregion
