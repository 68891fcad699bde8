import pytest

from decimal_money.calculation.carry_rounder import round_money_value


@pytest.mark.parametrize(
    "money_value, target_digits, having_digits, expected",
    [
        # Decision digit below 5: unchanged
        ("1000501", 2, 3, "1000501"),
        ("-0001", 2, 3, "-0001"),
        # Simple carry without propagation
        ("1236", 2, 3, "1246"),
        ("1005", 2, 3, "1015"),
        # Carry propagates through nines
        ("1995", 2, 3, "2005"),
        # Carry overflows the leftmost digit and grows the string
        ("9995", 2, 3, "10005"),
        ("9999", 2, 3, "10009"),
        # Carry reaches the sign: a new leading digit is inserted after '-'
        ("-9999", 2, 3, "-10009"),
        ("-995", 1, 2, "-1005"),
        # Negative without reaching the sign
        ("-1235", 2, 3, "-1245"),
    ],
)
def test_round_money_value(money_value, target_digits, having_digits, expected):
    assert round_money_value(money_value, target_digits, having_digits) == expected


def test_no_rounding_when_target_covers_all_digits():
    assert round_money_value("1999", 3, 3) == "1999"
    assert round_money_value("1999", 4, 3) == "1999"


def test_no_rounding_when_cut_position_is_before_string_start():
    assert round_money_value("9", 0, 5) == "9"


def test_decision_digit_is_the_only_one_examined():
    # "1.2349" -> decision digit is '4', the trailing '9' is ignored
    assert round_money_value("12349", 2, 4) == "12349"
