"""Validation outcomes.

A ValidationResult is created fresh by every validate() call and never
changes afterwards. Issues carry their path relative to the validator that
returned them; composites re-root child issues with nested_under().

Serialized form:
{
    "valid": false,
    "errors": [
        {
            "path": ["users", 1, "profile", "name"],
            "field": "users[1].profile.name",
            "message": "String must be at least 2 characters long",
            "code": "E2003_OUT_OF_RANGE"
        }
    ]
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from input_validator.errors import AppError, Err, ErrorCode, Ok, Result
from .paths import Path, PathSegment, format_path


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single failure located by its path from the validated root."""
    path: Path
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC

    @property
    def field_path(self) -> str:
        return format_path(self.path)

    def nested_under(self, segment: PathSegment) -> ValidationIssue:
        """Same issue, one level deeper: segment is prepended to the path."""
        return ValidationIssue(path=(segment, *self.path), message=self.message, code=self.code)

    def with_message(self, message: str) -> ValidationIssue:
        return ValidationIssue(path=self.path, message=message, code=self.code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "field": self.field_path,
            "message": self.message,
            "code": self.code.name,
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validate() call: flag, normalized value, ordered issues."""
    valid: bool
    value: Any = None
    errors: tuple[ValidationIssue, ...] = ()

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, errors: Iterable[ValidationIssue]) -> ValidationResult:
        errors = tuple(errors)
        if not errors:
            raise ValueError("A failed result needs at least one issue")
        return cls(valid=False, value=None, errors=errors)

    @classmethod
    def error(cls, message: str, code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC) -> ValidationResult:
        """Failure with one issue located at the validated value itself."""
        return cls.failure([ValidationIssue(path=(), message=message, code=code)])

    @property
    def is_valid(self) -> bool:
        return self.valid

    @property
    def is_invalid(self) -> bool:
        return not self.valid

    def raise_if_invalid(self, message: str = "Validation failed") -> Any:
        """Return the validated value, or raise ValidationError carrying every issue."""
        if not self.valid:
            raise ValidationError(message=message, issues=list(self.errors))
        return self.value

    def to_result(self) -> Result[Any, AppError]:
        if self.valid:
            return Ok(self.value)
        return Err(ValidationError(message="Validation failed", issues=list(self.errors)).to_app_error())

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "errors": [issue.to_dict() for issue in self.errors]}


@dataclass(eq=False)
class ValidationError(Exception):
    """Raised by ValidationResult.raise_if_invalid().

    Validators themselves never raise for bad input; this exception exists for
    callers that prefer exceptions at their own boundary.
    """
    message: str
    issues: list[ValidationIssue]

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        if len(self.issues) == 1:
            issue = self.issues[0]
            return f"{issue.field_path}: {issue.message}"
        return f"{self.message} ({len(self.issues)} errors)"

    @property
    def field_errors(self) -> dict[str, list[ValidationIssue]]:
        """Group issues by formatted field path."""
        grouped: dict[str, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.field_path, []).append(issue)
        return grouped

    def to_app_error(self) -> AppError:
        if len(self.issues) == 1:
            issue = self.issues[0]
            return AppError(
                code=ErrorCode.E2000_VALIDATION_GENERIC,
                message=f"{issue.field_path}: {issue.message}",
                metadata={"field": issue.field_path, "code": issue.code.name},
            )
        return AppError(
            code=ErrorCode.E2000_VALIDATION_GENERIC,
            message=f"{self.message}: {len(self.issues)} errors",
            metadata={
                "error_count": len(self.issues),
                "errors": [issue.to_dict() for issue in self.issues],
            },
        )
