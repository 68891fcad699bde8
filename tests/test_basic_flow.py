import logging

from decimal_money import Money, RoundingMode
from decimal_money.codec import format_minor_units, parse_decimal

logger = logging.getLogger(__name__)


def test_basic_flow(caplog):
    # Parse a human decimal string into minor units (the third fraction digit rounds the cents)
    price = Money(parse_decimal("19.995"))
    assert price.amount == "2000"

    # Split a bill three ways, rounding each share down, and keep the remainder
    share = price.divide(3, RoundingMode.DOWN)
    remainder = price.subtract(share, share, share)
    assert share.formatted == "6.66"
    assert remainder.formatted == "0.02"

    # Add 21% tax and format back for display
    with caplog.at_level(logging.DEBUG, logger="decimal_money"):
        total = price.add_tax(21)
    assert format_minor_units(total.amount) == "24.20"
    assert not any("Rounded intermediate amount" in record.message for record in caplog.records)

    # A fractional tax is rounded and the rounding is logged
    with caplog.at_level(logging.DEBUG, logger="decimal_money"):
        tax = Money(999).calculate_tax(21)
    assert tax.formatted == "2.10"
    assert any("Rounded intermediate amount" in record.message for record in caplog.records)

    logger.debug(f"Total: {total}, tax: {tax}")
    assert total.to_dict() == {"amount": "2420", "formatted": "24.20"}
