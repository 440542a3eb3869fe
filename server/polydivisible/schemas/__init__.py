from .polydivisible import CheckResponse, GenerateResponse, HealthResponse, ErrorResponse

__all__ = [
    "CheckResponse",
    "GenerateResponse",
    "HealthResponse",
    "ErrorResponse"
]
