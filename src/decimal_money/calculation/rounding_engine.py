from __future__ import annotations

from typing import Callable

from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import UnknownRoundingMode
from decimal_money.domain.number.rounding_mode import RoundingMode

# For an exact half: True rounds away from zero, False truncates toward zero
_ROUND_HALF_AWAY_BY_MODE: dict[RoundingMode, Callable[[DecimalValue], bool]] = {
    RoundingMode.HALF_UP: lambda value: True,
    RoundingMode.HALF_DOWN: lambda value: False,
    RoundingMode.HALF_EVEN: lambda value: not value.is_current_even,
    RoundingMode.HALF_ODD: lambda value: value.is_current_even,
    RoundingMode.HALF_POSITIVE_INFINITY: lambda value: not value.is_negative,
    RoundingMode.HALF_NEGATIVE_INFINITY: lambda value: value.is_negative,
}


def resolve_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """Return $mode as RoundingMode, accepting the enum itself or its string value.

    Raises:
        UnknownRoundingMode: If $mode is not one of the eight RoundingMode variants.
    """
    if isinstance(mode, RoundingMode):
        return mode

    if isinstance(mode, str):
        try:
            return RoundingMode(mode)
        except ValueError as e:
            raise UnknownRoundingMode(mode) from e

    raise UnknownRoundingMode(mode)


def round_to_integer(value: DecimalValue, mode: RoundingMode | str) -> str:
    """Collapse $value to an integer digit string under $mode.

    Every branch ends in one of two adjustments of the truncated integer part: add 0
    (toward zero) or add $value.rounding_multiplier (away from zero). UP and DOWN are
    ceiling and floor and ignore the half check. For the HALF_* modes, a fraction other
    than exactly ".5" goes to the nearest integer; only exact halves depend on the mode.

    Args:
        value: Number to round.
        mode: RoundingMode (or its string value).

    Returns:
        Integer digit string, never "-0".

    Raises:
        UnknownRoundingMode: If $mode is not recognized.

    Examples:
        >>> round_to_integer(DecimalValue("2", "5"), RoundingMode.HALF_EVEN)
        '2'
        >>> round_to_integer(DecimalValue("-2", "5"), RoundingMode.HALF_POSITIVE_INFINITY)
        '-2'
    """
    mode = resolve_rounding_mode(mode)

    if value.is_integer:
        return _adjust_integer_part(value, 0)

    if mode == RoundingMode.UP:
        return _adjust_integer_part(value, 0 if value.is_negative else 1)

    if mode == RoundingMode.DOWN:
        return _adjust_integer_part(value, -1 if value.is_negative else 0)

    if not value.is_half:
        return _adjust_integer_part(value, value.rounding_multiplier if value.is_closer_to_next else 0)

    round_away = _ROUND_HALF_AWAY_BY_MODE[mode](value)
    return _adjust_integer_part(value, value.rounding_multiplier if round_away else 0)


def _adjust_integer_part(value: DecimalValue, adjustment: int) -> str:
    # int("-0") == 0, so a negative zero integer part never survives
    return str(int(value.integer_part) + adjustment)
