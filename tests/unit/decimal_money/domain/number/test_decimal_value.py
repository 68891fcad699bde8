import pytest

from decimal_money.domain.number.decimal_value import DecimalValue
from decimal_money.domain.number.errors import MalformedDecimal


# region Construction


@pytest.mark.parametrize(
    "raw, integer_part, fractional_part",
    [
        ("12.340", "12", "34"),
        ("12", "12", ""),
        ("0", "0", ""),
        ("0.0", "0", ""),
        (".5", "0", "5"),
        ("-.5", "-0", "5"),
        ("-0.5", "-0", "5"),
        ("-12.05", "-12", "05"),
        ("99.", "99", ""),
        ("0.00659700000000", "0", "006597"),
    ],
)
def test_from_string_splits_and_normalizes(raw, integer_part, fractional_part):
    value = DecimalValue.from_string(raw)

    assert value.integer_part == integer_part
    assert value.fractional_part == fractional_part


@pytest.mark.parametrize("raw", ["INVALID", ".", "-", "", "-.", "007", "-05", "1.2.3", "1.5a0", "+1", "1,5", " 1"])
def test_from_string_rejects_malformed_input(raw):
    with pytest.raises(MalformedDecimal):
        DecimalValue.from_string(raw)


def test_fraction_is_validated_before_trailing_zeros_are_dropped():
    with pytest.raises(MalformedDecimal, match="fractional part"):
        DecimalValue("1", "x00")


def test_constructor_normalizes_empty_and_sign_only_integer_part():
    assert DecimalValue("", "5").integer_part == "0"
    assert DecimalValue("-", "5").integer_part == "-0"


def test_constructor_rejects_empty_number():
    with pytest.raises(MalformedDecimal, match="empty number"):
        DecimalValue("", "")


@pytest.mark.parametrize("integer_part, fractional_part", [(5, ""), ("1", 5), (None, ""), (1.5, "")])
def test_constructor_rejects_non_string_parts(integer_part, fractional_part):
    with pytest.raises(MalformedDecimal, match="expected str part"):
        DecimalValue(integer_part, fractional_part)


@pytest.mark.parametrize("raw", ["1٢.50", "１２", "1.٥", "-٣"])
def test_from_string_rejects_non_ascii_digits(raw):
    with pytest.raises(MalformedDecimal, match="invalid digit"):
        DecimalValue.from_string(raw)


def test_from_float_renders_fixed_digits():
    assert str(DecimalValue.from_float(0.1 + 0.2)) == "0.3"
    assert str(DecimalValue.from_float(1.5)) == "1.5"
    assert str(DecimalValue.from_float(-2.0)) == "-2"


def test_from_int_wraps_integer():
    value = DecimalValue.from_int(-42)

    assert value.integer_part == "-42"
    assert value.is_integer


def test_from_int_rejects_non_int():
    with pytest.raises(MalformedDecimal):
        DecimalValue.from_int(1.5)


# endregion

# region Predicates


def test_predicates():
    half = DecimalValue.from_string("2.5")
    negative = DecimalValue.from_string("-3.7")

    assert half.is_decimal and not half.is_integer
    assert half.is_half
    assert half.is_current_even
    assert half.is_closer_to_next
    assert half.rounding_multiplier == 1

    assert negative.is_negative
    assert not negative.is_half
    assert not negative.is_current_even
    assert negative.is_closer_to_next
    assert negative.rounding_multiplier == -1


def test_is_half_requires_exactly_five():
    assert not DecimalValue.from_string("2.51").is_half
    assert DecimalValue.from_string("2.50").is_half


def test_is_closer_to_next_is_false_for_integers():
    assert not DecimalValue.from_string("7").is_closer_to_next


def test_negative_zero_integer_part_is_negative_and_even():
    value = DecimalValue.from_string("-0.5")

    assert value.is_negative
    assert value.is_current_even


# endregion


def test_value_is_immutable_and_hashable():
    value = DecimalValue.from_string("1.50")

    with pytest.raises(AttributeError):
        value._integer_part = "2"

    assert value == DecimalValue("1", "5")
    assert hash(value) == hash(DecimalValue("1", "5"))
    assert str(value) == "1.5"
    assert repr(value) == "DecimalValue('1.5')"
