from __future__ import annotations

import json
import logging
from decimal import Decimal

from decimal_money.calculation import calculator
from decimal_money.calculation.rounding_engine import resolve_rounding_mode, round_to_integer
from decimal_money.codec.decimal_formatter import format as format_minor_units
from decimal_money.codec.decimal_parser import parse as parse_decimal
from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import DecimalMoneyError, DivisionByZero, InvalidOperand, MalformedDecimal
from decimal_money.domain.number.rounding_mode import RoundingMode
from decimal_money.utils.decimal_tools import NumberLike, as_decimal_value

logger = logging.getLogger(__name__)


class Money:
    """Represents a monetary amount as an integer count of minor units (e.g. cents).

    The amount is kept as an integer digit string, so values of any size are exact.
    Arithmetic never mutates an instance; every operation returns a new Money.
    Rounding happens only when a product or quotient has a fractional part, using an
    explicit RoundingMode (HALF_UP by default).
    """

    __slots__ = ("_amount",)

    def __init__(self, amount: int | str):
        """Initialize Money with an amount in minor units.

        Args:
            amount: Integer, or integer-ish string such as "350", "-12" or "350.000".

        Raises:
            InvalidOperand: If $amount is neither int nor str (bool included).
            MalformedDecimal: If $amount is not an integer(ish) value.
        """
        # Raise: amount must be an int or a string
        if isinstance(amount, bool) or not isinstance(amount, (int, str)):
            raise InvalidOperand(amount)

        if isinstance(amount, int):
            object.__setattr__(self, "_amount", str(amount))
            return

        number = DecimalValue.from_string(amount)

        # Raise: minor units cannot have a fractional part
        if not number.is_integer:
            raise MalformedDecimal(amount, "amount must be an integer(ish) value")

        object.__setattr__(self, "_amount", str(int(number.integer_part)))

    # region Construction

    @classmethod
    def create(cls, number: NumberLike) -> Money:
        """Create Money from minor units (int) or from a display value (float, Decimal, str).

        Args:
            number: int is taken as minor units (350 -> "3.50"); float, Decimal and str are
                decimal values at display scale ("3.5" -> 350).

        Returns:
            Money: New instance.

        Raises:
            InvalidOperand: If $number is not numeric.
            MalformedDecimal: If $number is a string that cannot be parsed.
        """
        if isinstance(number, bool):
            raise InvalidOperand(number)

        if isinstance(number, int):
            return cls(number)

        if isinstance(number, str):
            return cls(parse_decimal(number))

        if isinstance(number, (float, Decimal, DecimalValue)):
            return cls(parse_decimal(str(as_decimal_value(number))))

        raise InvalidOperand(number)

    @classmethod
    def is_valid(cls, number: NumberLike) -> bool:
        """Check whether $number can be turned into Money via `create`."""
        try:
            cls.create(number)
        except DecimalMoneyError:
            return False
        return True

    # endregion

    # region Accessors

    @property
    def amount(self) -> str:
        """Get the amount in minor units as an integer digit string."""
        return self._amount

    @property
    def value(self) -> int:
        """Get the amount in minor units as int."""
        return int(self._amount)

    @property
    def formatted(self) -> str:
        """Get the amount as a decimal string, e.g. '3.50'."""
        return format_minor_units(self._amount)

    def to_dict(self) -> dict[str, str]:
        return {"amount": self._amount, "formatted": self.formatted}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    # endregion

    # region Comparison

    def equals(self, other: Money) -> bool:
        return self._amount == other._amount

    def compare(self, other: Money) -> int:
        """Return -1, 0 or 1 when this amount is less than, equal to or greater than $other."""
        return calculator.compare(self._amount, other._amount)

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def is_zero(self) -> bool:
        return calculator.compare(self._amount, "0") == 0

    def is_positive(self) -> bool:
        return calculator.compare(self._amount, "0") > 0

    def is_negative(self) -> bool:
        return calculator.compare(self._amount, "0") < 0

    # endregion

    # region Arithmetic

    def add(self, *addends: Money) -> Money:
        """Return the sum of this amount and all $addends."""
        amount = self._amount
        for addend in addends:
            self._check_money(addend, "add")
            amount = calculator.add(amount, addend._amount)
        return Money(amount)

    def subtract(self, *subtrahends: Money) -> Money:
        """Return this amount minus all $subtrahends."""
        amount = self._amount
        for subtrahend in subtrahends:
            self._check_money(subtrahend, "subtract")
            amount = calculator.subtract(amount, subtrahend._amount)
        return Money(amount)

    def multiply(self, multiplier: NumberLike, rounding_mode: RoundingMode | str = RoundingMode.HALF_UP) -> Money:
        """Multiply by a number and round the product to whole minor units.

        Args:
            multiplier: int, float, Decimal or decimal string.
            rounding_mode: How a fractional product collapses to minor units.

        Returns:
            Money: New instance.

        Raises:
            InvalidOperand: If $multiplier is not numeric.
            MalformedDecimal: If $multiplier is a malformed decimal string.
            UnknownRoundingMode: If $rounding_mode is not recognized.
        """
        rounding_mode = resolve_rounding_mode(rounding_mode)
        product = calculator.multiply(self._amount, as_decimal_value(multiplier))
        return Money(self._round(product, rounding_mode))

    def divide(self, divisor: NumberLike, rounding_mode: RoundingMode | str = RoundingMode.HALF_UP) -> Money:
        """Divide by a number and round the quotient to whole minor units.

        Args:
            divisor: int, float, Decimal or decimal string.
            rounding_mode: How a fractional quotient collapses to minor units.

        Returns:
            Money: New instance.

        Raises:
            DivisionByZero: If $divisor is zero.
            InvalidOperand: If $divisor is not numeric.
            MalformedDecimal: If $divisor is a malformed decimal string.
            UnknownRoundingMode: If $rounding_mode is not recognized.
        """
        rounding_mode = resolve_rounding_mode(rounding_mode)
        quotient = calculator.divide(self._amount, as_decimal_value(divisor))
        return Money(self._round(quotient, rounding_mode))

    def mod(self, divisor: Money) -> Money:
        """Remainder of dividing by $divisor; the sign follows this amount."""
        self._check_money(divisor, "mod")
        return Money(calculator.mod(self._amount, divisor._amount))

    def ratio_of(self, other: Money) -> str:
        """Return this amount divided by $other at working scale, unrounded.

        Raises:
            DivisionByZero: If $other is zero.
        """
        self._check_money(other, "ratio_of")

        # Raise: ratio of a zero amount is undefined
        if other.is_zero():
            raise DivisionByZero(self._amount)

        return calculator.divide(self._amount, other._amount)

    def absolute(self) -> Money:
        return Money(calculator.absolute(self._amount))

    def negative(self) -> Money:
        return Money(0).subtract(self)

    # endregion

    # region Tax

    def calculate_tax(self, rate_percent: NumberLike, rounding_mode: RoundingMode | str = RoundingMode.HALF_UP) -> Money:
        """Return the tax portion of this amount for a percentage rate.

        The tax is computed as amount * $rate_percent / 100 and rounded once.

        Args:
            rate_percent: Tax rate in percent, e.g. 21 or "7.5".
            rounding_mode: How a fractional tax collapses to minor units.

        Returns:
            Money: Tax amount.
        """
        rounding_mode = resolve_rounding_mode(rounding_mode)
        taxed = calculator.multiply(self._amount, as_decimal_value(rate_percent))
        return Money(self._round(calculator.divide(taxed, 100), rounding_mode))

    def add_tax(self, rate_percent: NumberLike, rounding_mode: RoundingMode | str = RoundingMode.HALF_UP) -> Money:
        """Return this amount increased by `calculate_tax`."""
        return self.add(self.calculate_tax(rate_percent, rounding_mode))

    # endregion

    # region Aggregates

    @staticmethod
    def min(*monies: Money) -> Money:
        """Return the smallest of $monies."""
        Money._check_not_empty(monies, "min")
        result = monies[0]
        for money in monies[1:]:
            if money.less_than(result):
                result = money
        return result

    @staticmethod
    def max(*monies: Money) -> Money:
        """Return the largest of $monies."""
        Money._check_not_empty(monies, "max")
        result = monies[0]
        for money in monies[1:]:
            if money.greater_than(result):
                result = money
        return result

    @staticmethod
    def sum(*monies: Money) -> Money:
        """Return the total of $monies."""
        Money._check_not_empty(monies, "sum")
        return monies[0].add(*monies[1:])

    @staticmethod
    def avg(*monies: Money) -> Money:
        """Return the average of $monies, rounded HALF_UP to minor units."""
        Money._check_not_empty(monies, "avg")
        return Money.sum(*monies).divide(len(monies))

    # endregion

    # region Helpers

    @staticmethod
    def _round(amount: str, rounding_mode: RoundingMode) -> str:
        number = DecimalValue.from_string(amount)
        result = round_to_integer(number, rounding_mode)
        if number.is_decimal:
            logger.debug(f"Rounded intermediate amount '{amount}' to '{result}' with $rounding_mode {rounding_mode.name}")
        return result

    @staticmethod
    def _check_money(other: object, operation: str) -> None:
        # Raise: operation is defined only between Money instances
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be a Money instance, but provided value is: {other!r}")

    @staticmethod
    def _check_not_empty(monies: tuple[Money, ...], operation: str) -> None:
        # Raise: aggregate needs at least one amount
        if not monies:
            raise ValueError(f"Cannot call `{operation}` because $monies is empty")

    # endregion

    # region Magic methods

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.equals(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __add__(self, other):
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money, rounded HALF_UP)."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        try:
            return self.multiply(other)
        except InvalidOperand:
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money, rounded HALF_UP)."""
        if isinstance(other, Money):
            return NotImplemented
        try:
            return self.divide(other)
        except InvalidOperand:
            return NotImplemented

    def __mod__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.mod(other)

    def __neg__(self):
        return self.negative()

    def __abs__(self):
        return self.absolute()

    def __hash__(self) -> int:
        """Hash based on amount."""
        return hash(self._amount)

    def __str__(self) -> str:
        """Return string like '1000.50'."""
        return self.formatted

    def __repr__(self) -> str:
        """Return string like 'Money(100050)'."""
        return f"{self.__class__.__name__}({self._amount})"

    # endregion
