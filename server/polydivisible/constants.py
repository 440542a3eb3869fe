"""
Shared constants for the polydivisible numbers service.

This module centralizes the supported numeral envelope and the modulus used
for bounded prefix arithmetic so the codec, the core and the HTTP layer all
agree on the same limits.
"""

import math
from functools import reduce

# Supported numeral bases (inclusive)
MIN_BASE: int = 2
MAX_BASE: int = 100

# Supported sequence lengths (inclusive)
MIN_LENGTH: int = 1
MAX_LENGTH: int = 20

# Bases up to this value are written as one alphanumeric character per digit
# ('0'-'9', 'a'-'z'); larger bases use comma-separated decimal tokens.
ALPHANUMERIC_MAX_BASE: int = 36


def lcm_range(upper: int) -> int:
    """
    Least common multiple of every integer in 1..upper.

    Example:
        >>> lcm_range(10)
        2520
        >>> lcm_range(20)
        232792560
    """
    return reduce(lambda acc, k: acc * k // math.gcd(acc, k), range(1, upper + 1), 1)


# Prefix values are tracked modulo lcm(1..MAX_LENGTH). Every k <= MAX_LENGTH
# divides this modulus, so value % k == (value % LCM_MODULUS) % k.
LCM_MODULUS: int = lcm_range(MAX_LENGTH)

# Number of candidate steps between two polls of a cancellation callback
DEFAULT_CHECK_INTERVAL: int = 4096
