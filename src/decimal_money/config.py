from __future__ import annotations

# Number of minor-unit digits in a money amount (2 = cents)
DISPLAY_SCALE: int = 2

# Fractional digits kept by intermediate calculations (multiply, divide, compare)
WORKING_SCALE: int = 14

# Fractional digits used when a float operand is rendered into a decimal string
FLOAT_RENDER_DIGITS: int = 14
