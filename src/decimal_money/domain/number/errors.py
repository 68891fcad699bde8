"""Error types raised by the decimal engine."""

from __future__ import annotations


class DecimalMoneyError(Exception):
    """Base class for all errors raised by decimal_money."""


class MalformedDecimal(DecimalMoneyError, ValueError):
    """Raised when a value does not follow the decimal digit grammar."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse $value '{value}' as decimal: {reason}")


class DivisionByZero(DecimalMoneyError, ZeroDivisionError):
    """Raised when a divisor normalizes to zero."""

    def __init__(self, dividend: object):
        self.dividend = dividend
        super().__init__(f"Cannot divide $dividend '{dividend}' because the divisor is zero")


class UnknownRoundingMode(DecimalMoneyError, ValueError):
    """Raised when a rounding mode selector is not one of the RoundingMode variants."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(f"Unknown $rounding_mode '{mode}'")


class InvalidOperand(DecimalMoneyError, TypeError):
    """Raised when an operand is not numeric at all (wrong type, bool, NaN or infinity)."""

    def __init__(self, operand: object):
        self.operand = operand
        super().__init__(f"$operand must be a numeric value (int, float, Decimal or str), but provided value is: {operand!r} ({type(operand).__name__})")
