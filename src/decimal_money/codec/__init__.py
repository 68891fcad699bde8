"""Conversion between human decimal strings and integer minor units."""

from decimal_money.codec.decimal_formatter import format as format_minor_units
from decimal_money.codec.decimal_parser import parse as parse_decimal

__all__ = ["format_minor_units", "parse_decimal"]
