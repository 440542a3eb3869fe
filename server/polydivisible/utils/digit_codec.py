"""
Conversion between digit sequences and their textual form.

Bases up to 36 use one alphanumeric character per digit ('0'-'9', then
'a'-'z', case-insensitive on input). Larger bases use comma-separated
decimal tokens, e.g. "5,12,99" in base 100.
"""

import re
import string
from typing import List, Sequence

from ..constants import ALPHANUMERIC_MAX_BASE

# Leading zeros are allowed; longer significant parts are out of range for every base
_DECIMAL_TOKEN = re.compile(r'0*([0-9]{1,3})')

# '0'-'9' then 'a'-'z'
_ALPHABET = string.digits + string.ascii_lowercase
_CHAR_VALUES = {char: value for value, char in enumerate(_ALPHABET)}


class ParseError(ValueError):
    """
    Raised when text cannot be parsed into digits for a base.

    Attributes:
        token: The offending character or comma-separated token
        base: The numeral base the text was parsed against
        reason: Caller-facing message naming the token and base
    """

    def __init__(self, token: str, base: int, reason: str):
        super().__init__(reason)
        self.token = token
        self.base = base
        self.reason = reason


def parse_digits(text: str, base: int) -> List[int]:
    """
    Parse a textual number into its digit values, most significant first.

    Args:
        text: Alphanumeric digits (base <= 36) or comma-separated
            decimal tokens (base > 36)
        base: Number base (2-100)

    Returns:
        List of digit values, each in [0, base)

    Raises:
        ParseError: If any character or token is malformed or out of range

    Example:
        >>> parse_digits("1A2b", 16)
        [1, 10, 2, 11]
        >>> parse_digits("5, 12,99", 100)
        [5, 12, 99]
    """
    if not text or not isinstance(text, str):
        raise ParseError("", base, "Digits must be a non-empty string")

    if base > ALPHANUMERIC_MAX_BASE:
        return [_parse_token(part, base) for part in text.split(',')]

    digits = []
    for char in text:
        value = _CHAR_VALUES.get(char.lower())
        if value is None:
            raise ParseError(char, base, f'Invalid character "{char}" for base {base}')
        if value >= base:
            raise ParseError(
                char, base,
                f'Digit "{char}" (value {value}) is too large for base {base}'
            )
        digits.append(value)
    return digits


def _parse_token(part: str, base: int) -> int:
    """Parse one comma-separated decimal token for a base above 36."""
    token = part.strip()
    match = _DECIMAL_TOKEN.fullmatch(token)
    if not match or int(match.group(1)) >= base:
        raise ParseError(token, base, f'Invalid digit "{token}" for base {base}')
    return int(match.group(1))


def format_digits(digits: Sequence[int], base: int) -> str:
    """
    Format digit values back to text; the inverse of parse_digits.

    Letters are always lowercase. Bases above 36 give comma-joined decimals.
    """
    if base > ALPHANUMERIC_MAX_BASE:
        return ','.join(str(d) for d in digits)
    return ''.join(_ALPHABET[d] for d in digits)


def to_base(number: int, base: int) -> List[int]:
    """Convert a non-negative integer to its digits in the given base."""
    if number < 0:
        raise ValueError(f"Cannot convert negative number: {number}")
    if number == 0:
        return [0]

    digits = []
    while number > 0:
        number, digit = divmod(number, base)
        digits.append(digit)
    digits.reverse()
    return digits


def from_base(digits: Sequence[int], base: int) -> int:
    """
    Exact value of a digit sequence.

    Python integers are unbounded, so this stays exact at any magnitude and
    serves as the reference for the bounded prefix arithmetic.
    """
    result = 0
    for digit in digits:
        result = result * base + digit
    return result
