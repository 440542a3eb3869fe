"""
Polydivisible Number Service

A polydivisible number is a digit sequence where the first digit is
divisible by 1, the first two digits form a number divisible by 2, the first
three a number divisible by 3, and so on. This module checks the property and
enumerates every polydivisible sequence up to a maximum length.

All functions are pure and keep their working state local to the call, so
they are safe to use from concurrent requests.
"""

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence

from ..constants import DEFAULT_CHECK_INTERVAL, MAX_LENGTH, MIN_BASE, MIN_LENGTH
from ..utils.bounded_arithmetic import extend, initial, remainder

logger = logging.getLogger(__name__)

StopCallback = Callable[[], bool]


class Deadline:
    """
    Wall-clock deadline usable as a cancellation callback for generate().

    Calling the instance returns True once the timeout has elapsed.
    A timeout of None never expires.
    """

    def __init__(self, timeout_seconds: Optional[float]):
        self.timeout_seconds = timeout_seconds
        self.expires_at = (
            None if timeout_seconds is None
            else time.monotonic() + timeout_seconds
        )

    def __call__(self) -> bool:
        return self.expires_at is not None and time.monotonic() >= self.expires_at


@dataclass
class GenerationResult:
    """Collected output of an enumeration."""
    sequences: List[List[int]] = field(default_factory=list)
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.sequences)


def is_polydivisible(digits: Sequence[int], base: int) -> bool:
    """
    Check if a sequence of digits represents a polydivisible number.

    Stops at the first prefix that fails. The empty sequence is not
    polydivisible; any single digit (0 included) is.

    Args:
        digits: Digit values, most significant first
        base: Number base (2-100)

    Returns:
        True if every prefix of length k is divisible by k
    """
    if not digits:
        return False

    state = initial()
    for k, digit in enumerate(digits, start=1):
        state = extend(state, digit, base)
        if remainder(state, k) != 0:
            return False

    return True


def generate(
    base: int,
    max_length: int,
    should_stop: Optional[StopCallback] = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> Iterator[List[int]]:
    """
    Lazily enumerate all polydivisible sequences up to max_length.

    Sequences are produced in depth-first pre-order: each sequence comes
    before its own extensions, and siblings come in ascending digit order.
    Leading zeros are never produced. Calling generate() again restarts the
    enumeration from the beginning.

    Args:
        base: Number base (2-100)
        max_length: Maximum sequence length (1-20)
        should_stop: Optional callback polled every check_interval candidate
            digits; when it returns True the enumeration ends early
        check_interval: Candidate digits tried between two polls

    Returns:
        Iterator over fresh digit lists

    Raises:
        ValueError: If base or max_length are outside the exact envelope

    Example:
        >>> list(generate(10, 1))
        [[1], [2], [3], [4], [5], [6], [7], [8], [9]]
    """
    if base < MIN_BASE:
        raise ValueError(f"Base must be at least {MIN_BASE}, got {base}")
    if not MIN_LENGTH <= max_length <= MAX_LENGTH:
        raise ValueError(
            f"Max length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {max_length}"
        )
    if check_interval < 1:
        raise ValueError(f"Check interval must be positive, got {check_interval}")

    return _backtrack(base, max_length, should_stop, check_interval)


def _backtrack(
    base: int,
    max_length: int,
    should_stop: Optional[StopCallback],
    check_interval: int,
) -> Iterator[List[int]]:
    # Frames are (depth, prefix state, next candidate digit). The digit buffer
    # belongs to this generator only; buffer[:depth] is always the current path.
    buffer = [0] * max_length
    stack = [(0, initial(), 1)]
    steps = 0
    emitted = 0

    while stack:
        depth, state, digit = stack.pop()
        if digit >= base:
            continue

        # Resume with the next sibling once this candidate's subtree is done
        stack.append((depth, state, digit + 1))

        steps += 1
        if should_stop is not None and steps % check_interval == 0 and should_stop():
            logger.info(
                f"Enumeration for base {base}, max length {max_length} "
                f"stopped after {steps} steps and {emitted} results"
            )
            return

        extended = extend(state, digit, base)
        if remainder(extended, depth + 1) != 0:
            continue

        buffer[depth] = digit
        emitted += 1
        yield buffer[:depth + 1]

        if depth + 1 < max_length:
            stack.append((depth + 1, extended, 0))


def generate_all(
    base: int,
    max_length: int,
    should_stop: Optional[StopCallback] = None,
    limit: Optional[int] = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> GenerationResult:
    """
    Collect generate() into a list.

    The result is marked truncated when should_stop fired or when more than
    limit sequences exist.
    """
    stopped = False

    def poll() -> bool:
        nonlocal stopped
        stopped = bool(should_stop())
        return stopped

    sequences = generate(
        base,
        max_length,
        should_stop=poll if should_stop is not None else None,
        check_interval=check_interval,
    )

    if limit is None:
        collected = list(sequences)
        return GenerationResult(sequences=collected, truncated=stopped)

    collected = list(itertools.islice(sequences, limit))
    more = next(sequences, None) is not None
    if more:
        logger.info(f"Enumeration for base {base} capped at {limit} results")
    return GenerationResult(sequences=collected, truncated=stopped or more)
