from enum import Enum


class RoundingMode(Enum):
    """Represents how a value with a fractional part collapses to an integer.

    Only exact halves (fraction ".5") differ between the HALF_* variants; any other
    fraction rounds to the nearest integer. UP and DOWN are ceiling and floor.
    """

    HALF_UP = "HALF_UP"  # Half away from zero
    HALF_DOWN = "HALF_DOWN"  # Half toward zero
    HALF_EVEN = "HALF_EVEN"  # Half to the even neighbour (banker's rounding)
    HALF_ODD = "HALF_ODD"  # Half to the odd neighbour
    UP = "UP"  # Ceiling
    DOWN = "DOWN"  # Floor
    HALF_POSITIVE_INFINITY = "HALF_POSITIVE_INFINITY"  # Half toward +infinity
    HALF_NEGATIVE_INFINITY = "HALF_NEGATIVE_INFINITY"  # Half toward -infinity
