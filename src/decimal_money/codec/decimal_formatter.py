from __future__ import annotations

from decimal_money.config import DISPLAY_SCALE


def format(value_base: str | int, scale: int = DISPLAY_SCALE) -> str:
    """Render an integer count of minor units as a decimal string.

    Args:
        value_base: Minor units, e.g. "61351" or -6152.
        scale: Number of minor-unit digits.

    Returns:
        Decimal string with exactly $scale fraction digits, e.g. "613.51", "-61.52", "0.05".
    """
    digits = str(value_base)

    negative = digits.startswith("-")
    if negative:
        digits = digits[1:]

    if len(digits) > scale:
        formatted = digits[: len(digits) - scale]
        if scale > 0:
            formatted += "." + digits[len(digits) - scale :]
    else:
        formatted = "0." + digits.rjust(scale, "0")

    if negative:
        formatted = "-" + formatted

    return formatted
