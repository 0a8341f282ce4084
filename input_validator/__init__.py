# input_validator module exports
from input_validator.config import get_settings
from input_validator.errors import AppError, Err, ErrorCode, Ok, Result
from input_validator.logging import configure_logging, get_logger
from input_validator.validation import (
    ArrayValidator,
    BooleanValidator,
    DateValidator,
    NumberValidator,
    ObjectValidator,
    Schema,
    StringValidator,
    ValidationError,
    ValidationIssue,
    ValidationResult,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    "Schema",
    "Validator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "DateValidator",
    "ObjectValidator",
    "ArrayValidator",
    "ValidationResult",
    "ValidationIssue",
    "ValidationError",
    "AppError",
    "ErrorCode",
    "Ok",
    "Err",
    "Result",
    "configure_logging",
    "get_logger",
    "get_settings",
]
