from fastapi import APIRouter, Depends, Query, Request
from typing import Optional
import logging

from ..config import Settings, get_settings
from ..constants import MAX_BASE, MAX_LENGTH, MIN_BASE, MIN_LENGTH
from ..dependencies import generate_rate_limit, limiter
from ..schemas.polydivisible import CheckResponse, ErrorResponse, GenerateResponse
from ..services.polydivisible import Deadline, generate_all, is_polydivisible
from ..utils.digit_codec import ParseError, format_digits, parse_digits
from ..utils.errors import bad_request_error, parse_error, parse_int_param

logger = logging.getLogger(__name__)

router = APIRouter()

BASE_RANGE_MESSAGE = f"Base must be an integer between {MIN_BASE} and {MAX_BASE}"
LENGTH_RANGE_MESSAGE = f"Max length must be an integer between {MIN_LENGTH} and {MAX_LENGTH}"

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _parse_base(raw: str) -> int:
    base = parse_int_param(raw)
    if base is None or not MIN_BASE <= base <= MAX_BASE:
        logger.warning(f"Rejected base {raw!r}")
        raise bad_request_error(BASE_RANGE_MESSAGE)
    return base


@router.get("/check", response_model=CheckResponse, responses=ERROR_RESPONSES)
async def check_polydivisible(
    digits: Optional[str] = Query(
        None, description="Alphanumeric for base <= 36, comma-separated for base > 36"
    ),
    base: Optional[str] = Query(None, description="Integer from 2 to 100"),
):
    """
    Check if a given string represents a polydivisible number.

    Returns the parsed digit values alongside the verdict so clients can show
    how the input was interpreted.
    """
    if not digits or not base:
        raise bad_request_error("Missing required parameters: digits and base")

    base_num = _parse_base(base)

    try:
        digit_values = parse_digits(digits, base_num)
    except ParseError as e:
        logger.warning(f"Rejected digits {digits!r}: {e}")
        raise parse_error(e) from e

    if len(digit_values) > MAX_LENGTH:
        raise bad_request_error(
            f"Numbers longer than {MAX_LENGTH} digits are not supported"
        )

    return CheckResponse(
        is_polydivisible=is_polydivisible(digit_values, base_num),
        digits=digits,
        base=base_num,
        parsed_digits=digit_values,
    )


# Plain def: the enumeration is CPU-bound and runs in the threadpool
@router.get("/generate", response_model=GenerateResponse, responses=ERROR_RESPONSES)
@limiter.limit(generate_rate_limit)
def generate_polydivisible(
    request: Request,
    base: Optional[str] = Query(None, description="Integer from 2 to 100"),
    max_length: Optional[str] = Query(
        None, alias="maxLength", description="Maximum length of generated numbers (1-20)"
    ),
    settings: Settings = Depends(get_settings),
):
    """
    Generate all polydivisible numbers up to the specified length.

    Numbers come in depth-first order: every number precedes its own
    extensions, siblings ascend by last digit. Large base/length combinations
    are cut short by the configured time budget and result cap, in which case
    `truncated` is true.
    """
    if not base or not max_length:
        raise bad_request_error("Missing required parameters: base and maxLength")

    base_num = _parse_base(base)

    max_len = parse_int_param(max_length)
    if max_len is None or not MIN_LENGTH <= max_len <= MAX_LENGTH:
        logger.warning(f"Rejected maxLength {max_length!r}")
        raise bad_request_error(LENGTH_RANGE_MESSAGE)

    result = generate_all(
        base_num,
        max_len,
        should_stop=Deadline(settings.generate_timeout_seconds),
        limit=settings.max_generate_results,
        check_interval=settings.generate_check_interval,
    )

    numbers = [format_digits(digit_values, base_num) for digit_values in result.sequences]

    logger.info(
        f"Generated {len(numbers)} polydivisible numbers for base {base_num}, "
        f"max length {max_len}" + (" (truncated)" if result.truncated else "")
    )

    return GenerateResponse(
        polydivisible_numbers=numbers,
        base=base_num,
        max_length=max_len,
        count=len(numbers),
        truncated=result.truncated,
    )
