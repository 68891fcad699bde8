"""Monetary domain package.

This package contains the Money value object: an immutable amount in integer minor
units that delegates parsing, formatting, arithmetic and rounding to the decimal engine.
"""

from decimal_money.domain.monetary.money import Money

__all__ = ["Money"]
