"""
Error handling utilities for consistent HTTP exceptions across the API.

Range checks on base and length live here and in the routes, never in the
core, which assumes validated input.
"""

from fastapi import HTTPException, status
from typing import Optional
import re

from .digit_codec import ParseError

# Optionally signed ASCII decimal; anything longer is out of every supported range
_INT_PARAM = re.compile(r"[+-]?[0-9]{1,4}")


def bad_request_error(detail: str) -> HTTPException:
    """
    Create a consistent 400 Bad Request error.

    Args:
        detail: Error message detail

    Returns:
        HTTPException with 400 status code

    Example:
        raise bad_request_error("Base must be an integer between 2 and 100")
        # HTTPException(status_code=400, detail="Base must be an integer between 2 and 100")
    """
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail
    )


def parse_error(error: ParseError) -> HTTPException:
    """Create a 400 error from a codec ParseError, keeping its message."""
    return bad_request_error(str(error))


def parse_int_param(raw: str) -> Optional[int]:
    """
    Parse an integer query parameter strictly.

    Returns None when the text is not a plain (optionally signed) decimal
    integer, so callers can report it together with range violations.
    """
    text = raw.strip()
    if not _INT_PARAM.fullmatch(text):
        return None
    return int(text)
