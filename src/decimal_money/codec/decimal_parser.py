from __future__ import annotations

import logging
import re

from decimal_money.calculation.carry_rounder import round_money_value
from decimal_money.config import DISPLAY_SCALE
from decimal_money.domain.number.errors import MalformedDecimal

logger = logging.getLogger(__name__)

# Optional sign, ASCII integer digits ("0" or no leading zero), optional '.', optional ASCII fraction
DECIMAL_PATTERN = re.compile(r"(?P<sign>-)?(?P<digits>0|[1-9][0-9]*)?\.?(?P<fraction>[0-9]+)?")


def parse(money: str, scale: int = DISPLAY_SCALE) -> str:
    """Parse a human decimal string into an integer count of minor units.

    Fraction digits beyond $scale are discarded after rounding on the first discarded
    digit (5 or more rounds away from zero); missing fraction digits are zero-padded.

    Args:
        money: Decimal string such as "1000.50", "-0.01", ".99" or "99.". Surrounding
            whitespace is ignored and an empty string parses to zero.
        scale: Number of minor-unit digits.

    Returns:
        Minor units as an integer digit string, e.g. "100050"; never "-0".

    Raises:
        MalformedDecimal: If $money does not follow the decimal grammar.

    Examples:
        >>> parse("9.995")
        '1000'
        >>> parse("-0.001")
        '0'
    """
    # Raise: only strings can be parsed
    if not isinstance(money, str):
        raise MalformedDecimal(money, f"formatted money must be a string (e.g. '1.00'), got {type(money).__name__}")

    decimal = money.strip()
    if decimal == "":
        return "0"

    match = DECIMAL_PATTERN.fullmatch(decimal)

    # Raise: input must match the grammar and carry at least one digit
    if match is None or (match.group("digits") is None and match.group("fraction") is None):
        raise MalformedDecimal(money, "does not match the decimal grammar")

    negative = match.group("sign") == "-"
    fraction = match.group("fraction") or ""

    result = ("-" if negative else "") + (match.group("digits") or "")

    fraction_digits = len(fraction)
    result += fraction
    if fraction_digits > scale:
        rounded = round_money_value(result, scale, fraction_digits)
        logger.debug(f"Reduced $money '{money}' from {fraction_digits} to {scale} fraction digit(s); carry applied: {rounded != result}")
        result = rounded[: scale - fraction_digits]
    else:
        result += "0" * (scale - fraction_digits)

    if negative:
        result = "-" + result[1:].lstrip("0")
    else:
        result = result.lstrip("0")

    if result in ("", "-"):
        return "0"

    return result
