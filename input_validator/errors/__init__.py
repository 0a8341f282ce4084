"""Error Handling

Usage:
    from input_validator.errors import Ok, Err, AppError, ErrorCode

    match parse_date("2024-01-15"):
        case Ok(value):
            print(value.isoformat())
        case Err(error):
            log.warning("bad_date", code=error.code.name)
"""
from .types import (
    AppError,
    Err,
    ErrorCode,
    Ok,
    Result,
)

__all__ = [
    "AppError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
]
