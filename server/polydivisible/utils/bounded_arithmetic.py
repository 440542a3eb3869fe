"""
Bounded prefix arithmetic for divisibility checks.

A prefix value at base 100 and length 20 reaches 100^20 (about 10^40). Rather
than carry that magnitude around, the running value is kept modulo
LCM_MODULUS = lcm(1..20) = 232792560. Every length k <= 20 divides the
modulus, so:

    value % k == (value % LCM_MODULUS) % k

which makes the reduced value exactly as good as the true one for every
divisibility test the service performs. The reduced value never exceeds
LCM_MODULUS * MAX_BASE before reduction, well inside 64 bits.
"""

from typing import NamedTuple

from ..constants import LCM_MODULUS, MAX_LENGTH


class PrefixState(NamedTuple):
    """Positional value of a digit prefix, reduced modulo LCM_MODULUS."""
    value: int = 0


_EMPTY = PrefixState(0)


def initial() -> PrefixState:
    """State of the empty prefix (value 0)."""
    return _EMPTY


def extend(state: PrefixState, digit: int, base: int) -> PrefixState:
    """Append one digit to a prefix: (value * base + digit) mod LCM_MODULUS."""
    return PrefixState((state.value * base + digit) % LCM_MODULUS)


def remainder(state: PrefixState, k: int) -> int:
    """
    Remainder of the true prefix value modulo k.

    Args:
        state: Current prefix state
        k: Divisor, 1 <= k <= MAX_LENGTH

    Raises:
        ValueError: If k is outside 1..MAX_LENGTH
    """
    if not 1 <= k <= MAX_LENGTH:
        raise ValueError(f"Divisor {k} outside supported range 1..{MAX_LENGTH}")
    return state.value % k
