"""Validator contract.

Validators are frozen dataclasses. Every chain call returns a new validator,
so a schema can be shared between threads and the order of chain calls never
changes what a validator accepts:

    Schema.string().min_length(3).optional() == Schema.string().optional().min_length(3)

Concrete validators implement perform_validation(); validate() wraps it with
the optional short-circuit and custom-message handling shared by all of them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Self

from input_validator.config import get_settings
from input_validator.errors import ErrorCode
from input_validator.logging import validation_logger
from .result import ValidationResult


@dataclass(frozen=True, slots=True, kw_only=True)
class Validator(ABC):
    """Base class for all validators."""
    is_optional: bool = False
    custom_message: str | None = None

    kind: ClassVar[str] = "value"

    def optional(self) -> Self:
        """Treat None and "" as valid without running any check."""
        return replace(self, is_optional=True)

    def with_message(self, message: str) -> Self:
        """Replace this validator's own failure messages (not its children's)."""
        return replace(self, custom_message=message)

    def validate(self, value: Any) -> ValidationResult:
        if self.is_optional and (value is None or (isinstance(value, str) and value == "")):
            return ValidationResult.success(None)

        result = self.perform_validation(value)
        if result.valid:
            return result

        if self.custom_message is not None:
            # Child issues arrive with a non-empty path; only our own are rewritten.
            result = ValidationResult.failure(
                issue.with_message(self.custom_message) if not issue.path else issue
                for issue in result.errors
            )

        if get_settings().LOG_VALIDATION_FAILURES:
            validation_logger.debug(
                "validation_failed",
                validator=self.kind,
                error_count=len(result.errors),
                fields=[issue.field_path for issue in result.errors],
            )
        return result

    def __call__(self, value: Any) -> ValidationResult:
        return self.validate(value)

    @abstractmethod
    def perform_validation(self, value: Any) -> ValidationResult:
        """Variant-specific check for a value that was not short-circuited."""

    def _fail(self, message: str, code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC) -> ValidationResult:
        return ValidationResult.error(message, code)

    def _type_mismatch(self, expected: str, value: Any) -> ValidationResult:
        return self._fail(f"Expected {expected}, got {type(value).__name__}", ErrorCode.E2004_INVALID_TYPE)


def check_count(name: str, count: int | None) -> int | None:
    """Validate a length/count bound at build time."""
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {count!r}")
    return count
