from __future__ import annotations

from decimal_money.config import FLOAT_RENDER_DIGITS
from decimal_money.domain.number.errors import MalformedDecimal

_DIGITS = frozenset("0123456789")


class DecimalValue:
    """Exact decimal number held as two digit strings.

    The integer part is a run of ASCII digits with an optional leading '-'. It never has
    leading zeros, except for the literal "0" and the sign-only "-0" (a negative value whose
    integer part is zero, e.g. "-0.5"). The fractional part holds digits only and is stored
    without trailing zeros; an empty fractional part means the value is an integer.

    Instances are immutable.
    """

    __slots__ = ("_integer_part", "_fractional_part")

    def __init__(self, integer_part: str, fractional_part: str = ""):
        """Validate and normalize both parts.

        Args:
            integer_part: Digits with an optional leading '-'. "" normalizes to "0" and "-" to "-0".
            fractional_part: Digits only. Trailing zeros are stripped after validation.

        Raises:
            MalformedDecimal: If a part is not a string or contains invalid characters, if
                the integer part has leading zeros, or if both parts are empty.
        """
        # Raise: both parts are digit strings
        for part in (integer_part, fractional_part):
            if not isinstance(part, str):
                raise MalformedDecimal(part, f"expected str part, got {type(part).__name__}")

        # Raise: a number needs at least one of its parts
        if integer_part == "" and fractional_part == "":
            raise MalformedDecimal("", "empty number is invalid")

        # Raise: a bare sign has no digits at all
        if integer_part == "-" and fractional_part == "":
            raise MalformedDecimal("-", "sign without digits is invalid")

        object.__setattr__(self, "_integer_part", _parse_integer_part(integer_part))
        object.__setattr__(self, "_fractional_part", _parse_fractional_part(fractional_part))

    # region Construction

    @classmethod
    def from_string(cls, number: str) -> DecimalValue:
        """Parse "integer[.fraction]" by splitting on the first '.'.

        Args:
            number: Decimal string, e.g. "-12.340".

        Returns:
            DecimalValue with the trailing zeros of the fraction removed.

        Raises:
            MalformedDecimal: If $number does not follow the digit grammar.
        """
        if not isinstance(number, str):
            raise MalformedDecimal(number, f"expected str, got {type(number).__name__}")

        integer_part, _, fractional_part = number.partition(".")

        try:
            return cls(integer_part, fractional_part)
        except MalformedDecimal as e:
            raise MalformedDecimal(number, e.reason) from e

    @classmethod
    def from_int(cls, number: int) -> DecimalValue:
        """Wrap an integer with an empty fractional part."""
        if not isinstance(number, int) or isinstance(number, bool):
            raise MalformedDecimal(number, f"integer value expected, got {type(number).__name__}")
        return cls(str(number))

    @classmethod
    def from_float(cls, number: float, digits: int = FLOAT_RENDER_DIGITS) -> DecimalValue:
        """Render a float with a fixed number of fractional digits, then parse it.

        0.1 + 0.2 renders as "0.30000000000000" and normalizes to "0.3".

        Args:
            number: Finite float.
            digits: Fractional digits used for rendering.

        Returns:
            Parsed DecimalValue.
        """
        if not isinstance(number, float):
            raise MalformedDecimal(number, f"floating point value expected, got {type(number).__name__}")
        return cls.from_string(f"{number:.{digits}f}")

    # endregion

    # region Parts

    @property
    def integer_part(self) -> str:
        return self._integer_part

    @property
    def fractional_part(self) -> str:
        return self._fractional_part

    # endregion

    # region Predicates

    @property
    def is_integer(self) -> bool:
        return self._fractional_part == ""

    @property
    def is_decimal(self) -> bool:
        return self._fractional_part != ""

    @property
    def is_negative(self) -> bool:
        return self._integer_part[0] == "-"

    @property
    def is_half(self) -> bool:
        """True if the fractional part is exactly ".5"."""
        return self._fractional_part == "5"

    @property
    def is_current_even(self) -> bool:
        """True if the last digit of the integer part is even."""
        return int(self._integer_part[-1]) % 2 == 0

    @property
    def is_closer_to_next(self) -> bool:
        """True if the first fractional digit is 5 or more."""
        if self._fractional_part == "":
            return False
        return self._fractional_part[0] >= "5"

    @property
    def rounding_multiplier(self) -> int:
        """Step that moves the integer part one unit away from zero."""
        return -1 if self.is_negative else 1

    # endregion

    # region Magic methods

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self._integer_part == other._integer_part and self._fractional_part == other._fractional_part

    def __hash__(self) -> int:
        return hash((self._integer_part, self._fractional_part))

    def __str__(self) -> str:
        if self._fractional_part == "":
            return self._integer_part
        return f"{self._integer_part}.{self._fractional_part}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion


def _parse_integer_part(number: str) -> str:
    if number == "" or number == "0":
        return "0"

    if number == "-":
        return "-0"

    digits = number[1:] if number[0] == "-" else number

    # Raise: only ASCII digits may follow the optional sign
    for digit in digits:
        if digit not in _DIGITS:
            raise MalformedDecimal(number, f"invalid digit '{digit}' found in integer part")

    # Raise: "0" and "-0" are the only integer parts allowed to start with zero
    if digits == "" or (digits[0] == "0" and len(digits) > 1):
        raise MalformedDecimal(number, "leading zeros are not allowed")

    return number


def _parse_fractional_part(number: str) -> str:
    # Raise: fraction holds digits only, checked before trailing zeros are dropped
    for digit in number:
        if digit not in _DIGITS:
            raise MalformedDecimal(number, f"invalid digit '{digit}' found in fractional part")

    return number.rstrip("0")

