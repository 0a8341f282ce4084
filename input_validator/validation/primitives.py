"""Primitive validators: string, number, boolean, date.

Each check short-circuits on the first failing constraint, in the order the
constraints are listed on the class.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from typing import Any, ClassVar

from input_validator.errors import ErrorCode
from input_validator.logging import validation_logger
from .base import Validator, check_count
from .dates import as_date, coerce_bound, parse_date
from .result import ValidationResult

NUMBER_TYPES = (int, float, Decimal, Fraction)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


# ============================================================================
# String
# ============================================================================

@dataclass(frozen=True, slots=True)
class StringValidator(Validator):
    """Strings with optional length bounds and a full-match pattern."""
    min_chars: int | None = None
    max_chars: int | None = None
    regex: str | re.Pattern | None = None

    kind: ClassVar[str] = "string"

    def min_length(self, length: int) -> StringValidator:
        return replace(self, min_chars=check_count("min_length", length))

    def max_length(self, length: int) -> StringValidator:
        return replace(self, max_chars=check_count("max_length", length))

    def pattern(self, regex: str | re.Pattern) -> StringValidator:
        """The whole string must match regex."""
        if not isinstance(regex, (str, re.Pattern)):
            raise TypeError(f"pattern must be a str or compiled regex, got {type(regex).__name__}")
        if isinstance(regex, re.Pattern) and isinstance(regex.pattern, bytes):
            raise TypeError("pattern must match text, got a bytes pattern")
        return replace(self, regex=regex)

    def perform_validation(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self._type_mismatch("string", value)

        if self.min_chars is not None and len(value) < self.min_chars:
            return self._fail(
                f"String must be at least {self.min_chars} characters long",
                ErrorCode.E2003_OUT_OF_RANGE,
            )

        if self.max_chars is not None and len(value) > self.max_chars:
            return self._fail(
                f"String must be at most {self.max_chars} characters long",
                ErrorCode.E2003_OUT_OF_RANGE,
            )

        if self.regex is not None:
            try:
                compiled = self.regex if isinstance(self.regex, re.Pattern) else _compile(self.regex)
                matched = compiled.fullmatch(value) is not None
            except (re.error, TypeError) as e:
                validation_logger.warning("invalid_pattern", pattern=str(self.regex), error=str(e))
                return self._fail(f"Invalid pattern: {e}", ErrorCode.E2005_CONSTRAINT_VIOLATION)
            if not matched:
                return self._fail("String does not match required pattern", ErrorCode.E2002_INVALID_FORMAT)

        return ValidationResult.success(value)


# ============================================================================
# Number
# ============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, NUMBER_TYPES) and not isinstance(value, bool)


def _is_whole(value: int | float | Decimal | Fraction) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return value.denominator == 1


def _is_nan(value: int | float | Decimal | Fraction) -> bool:
    if isinstance(value, float):
        return value != value
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


@dataclass(frozen=True, slots=True)
class NumberValidator(Validator):
    """Numbers with inclusive bounds and an optional whole-number requirement.

    bool is not a number here even though it subclasses int.
    """
    minimum: int | float | Decimal | Fraction | None = None
    maximum: int | float | Decimal | Fraction | None = None
    integer_only: bool = False

    kind: ClassVar[str] = "number"

    def min(self, value: int | float | Decimal | Fraction) -> NumberValidator:
        if not _is_number(value):
            raise TypeError(f"min must be a number, got {type(value).__name__}")
        if _is_nan(value):
            raise ValueError("min must not be NaN")
        return replace(self, minimum=value)

    def max(self, value: int | float | Decimal | Fraction) -> NumberValidator:
        if not _is_number(value):
            raise TypeError(f"max must be a number, got {type(value).__name__}")
        if _is_nan(value):
            raise ValueError("max must not be NaN")
        return replace(self, maximum=value)

    def integer(self) -> NumberValidator:
        return replace(self, integer_only=True)

    def perform_validation(self, value: Any) -> ValidationResult:
        if not _is_number(value):
            return self._type_mismatch("number", value)

        if self.integer_only and not _is_whole(value):
            return self._fail(
                f"Expected integer, got {type(value).__name__}",
                ErrorCode.E2005_CONSTRAINT_VIOLATION,
            )

        nan = _is_nan(value)

        if self.minimum is not None and (nan or value < self.minimum):
            return self._fail(f"Number must be at least {self.minimum}", ErrorCode.E2003_OUT_OF_RANGE)

        if self.maximum is not None and (nan or value > self.maximum):
            return self._fail(f"Number must be at most {self.maximum}", ErrorCode.E2003_OUT_OF_RANGE)

        return ValidationResult.success(value)


# ============================================================================
# Boolean
# ============================================================================

@dataclass(frozen=True, slots=True)
class BooleanValidator(Validator):
    """Exactly True or False. Truthy and falsy stand-ins are rejected."""

    kind: ClassVar[str] = "boolean"

    def perform_validation(self, value: Any) -> ValidationResult:
        if value is True or value is False:
            return ValidationResult.success(value)
        return self._type_mismatch("boolean", value)


# ============================================================================
# Date
# ============================================================================

@dataclass(frozen=True, slots=True)
class DateValidator(Validator):
    """Dates, datetimes, or parseable date strings, with exclusive bounds.

    The validated value is always a datetime.date.
    """
    lower_bound: date | None = None
    upper_bound: date | None = None

    kind: ClassVar[str] = "date"

    def after(self, bound: date | str) -> DateValidator:
        return replace(self, lower_bound=coerce_bound(bound))

    def before(self, bound: date | str) -> DateValidator:
        return replace(self, upper_bound=coerce_bound(bound))

    def perform_validation(self, value: Any) -> ValidationResult:
        if isinstance(value, date):
            parsed = as_date(value)
        elif isinstance(value, str):
            result = parse_date(value)
            if result.is_err():
                return self._fail("Invalid date format", ErrorCode.E2012_INVALID_DATE)
            parsed = result.unwrap()
        else:
            return self._type_mismatch("date", value)

        if self.lower_bound is not None and parsed <= self.lower_bound:
            return self._fail(f"Date must be after {self.lower_bound.isoformat()}", ErrorCode.E2003_OUT_OF_RANGE)

        if self.upper_bound is not None and parsed >= self.upper_bound:
            return self._fail(f"Date must be before {self.upper_bound.isoformat()}", ErrorCode.E2003_OUT_OF_RANGE)

        return ValidationResult.success(parsed)
