"""
Polydivisible numbers: checking and enumeration in bases 2 to 100.

The four core operations are importable from here without pulling in the
web stack.
"""

from .services.polydivisible import generate, is_polydivisible
from .utils.digit_codec import ParseError, format_digits, parse_digits

__version__ = "1.0.0"

__all__ = [
    "ParseError",
    "format_digits",
    "generate",
    "is_polydivisible",
    "parse_digits",
]
