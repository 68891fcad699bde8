"""Rounding and arithmetic over decimal digit strings."""
