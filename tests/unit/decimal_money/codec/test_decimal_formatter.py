import pytest

from decimal_money import codec
from decimal_money.codec.decimal_formatter import format as format_minor_units


@pytest.mark.parametrize(
    "amount, expected",
    [
        (5005, "50.05"),
        (100, "1.00"),
        (41, "0.41"),
        (5, "0.05"),
        (50, "0.50"),
        (350, "3.50"),
        (1357, "13.57"),
        (61351, "613.51"),
        (-61351, "-613.51"),
        (-6152, "-61.52"),
        (-5055, "-50.55"),
        (-5, "-0.05"),
        (0, "0.00"),
        (50050050, "500500.50"),
        ("61351", "613.51"),
    ],
)
def test_format(amount, expected):
    assert format_minor_units(amount) == expected


@pytest.mark.parametrize(
    "amount, scale, expected",
    [
        (12345, 0, "12345"),
        (-7, 0, "-7"),
        (12345, 4, "1.2345"),
        (5, 3, "0.005"),
    ],
)
def test_format_with_custom_scale(amount, scale, expected):
    assert format_minor_units(amount, scale=scale) == expected


def test_codec_package_does_not_shadow_builtin_format():
    assert not hasattr(codec, "format")
    assert codec.__all__ == ["format_minor_units", "parse_decimal"]
    assert codec.format_minor_units("100050") == "1000.50"
    assert codec.parse_decimal("1000.50") == "100050"
