from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime


class CheckResponse(BaseModel):
    """Result of checking one digit string."""
    model_config = ConfigDict(populate_by_name=True)

    is_polydivisible: bool = Field(..., alias="isPolydivisible")
    digits: str = Field(..., description="Digits exactly as submitted")
    base: int = Field(..., description="Number base (2-100)")
    parsed_digits: List[int] = Field(
        ..., alias="parsedDigits", description="Digit values, most significant first"
    )


class GenerateResponse(BaseModel):
    """All polydivisible numbers up to a length, in enumeration order."""
    model_config = ConfigDict(populate_by_name=True)

    polydivisible_numbers: List[str] = Field(
        default_factory=list, alias="polydivisibleNumbers",
        description="Formatted numbers, shorter numbers before their extensions"
    )
    base: int
    max_length: int = Field(..., alias="maxLength")
    count: int
    truncated: bool = Field(
        False, description="True when the time budget or result cap cut the enumeration short"
    )


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
