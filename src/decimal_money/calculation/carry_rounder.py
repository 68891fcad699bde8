from __future__ import annotations


def round_money_value(money_value: str, target_digits: int, having_digits: int) -> str:
    """Round a digit string that carries $having_digits fractional digits toward $target_digits.

    $money_value holds the sign, integer digits and fraction digits concatenated without a
    decimal point (e.g. "-9999" for "-9.999" with $having_digits = 3). Only the single
    decision digit right after the kept digits is examined: if it is 5 or more, a carry of 1
    is propagated leftward through the kept digits. The discarded digits are NOT removed;
    the caller truncates (or pads) the result to the target scale.

    Args:
        money_value: Concatenated digit string, optionally starting with '-'.
        target_digits: Number of fractional digits to keep.
        having_digits: Number of fractional digits present in $money_value.

    Returns:
        Digit string with the carry applied. Its length grows by one when the carry
        overflows the leftmost digit (e.g. "9995" -> "10005").

    Examples:
        >>> round_money_value("9995", 2, 3)
        '10005'
        >>> round_money_value("-9999", 2, 3)
        '-10009'
        >>> round_money_value("1000501", 2, 3)
        '1000501'
    """
    cut_position = len(money_value) - having_digits + target_digits

    # Nothing to discard, or nothing left of the cut to carry into
    if target_digits >= having_digits or cut_position <= 0:
        return money_value

    if money_value[cut_position] < "5":
        return money_value

    digits = list(money_value)
    position = cut_position
    carry = 1

    while carry and position > 0:
        position -= 1

        # The sign absorbs the carry as a new leading digit and moves outward
        if digits[position] == "-":
            digits[position] = str(carry)
            digits.insert(0, "-")
            carry = 0
            break

        total = int(digits[position]) + carry
        digits[position] = str(total % 10)
        carry = total // 10

    # Carry propagated past the leftmost digit
    if carry:
        digits.insert(0, str(carry))

    return "".join(digits)
