"""Declarative Validation System

Chainable validators for strings, numbers, booleans, dates, objects and
arrays. A single validate() call walks the whole schema and reports every
failure with the path that leads to it.

Key Features:
- Immutable validators: every chain call returns a new validator
- Collect-all error accumulation through nested objects and arrays
- Path-qualified issues (("users", 1, "profile", "name"))
- Optional fields and per-validator custom messages
- Structured error codes from the shared ErrorCode taxonomy

Usage:
    from input_validator.validation import Schema

    schema = Schema.object({
        "users": Schema.array(Schema.object({
            "profile": Schema.object({"name": Schema.string().min_length(2)}),
        })),
    })

    result = schema.validate(payload)
    if result.is_invalid:
        for issue in result.errors:
            print(issue.field_path, issue.message)
"""
from .base import Validator
from .composites import ArrayValidator, ObjectValidator
from .dates import parse_date
from .paths import field_key, format_path
from .primitives import BooleanValidator, DateValidator, NumberValidator, StringValidator
from .result import ValidationError, ValidationIssue, ValidationResult
from .schema import Schema

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
    "parse_date",
    "field_key",
    "format_path",
]
