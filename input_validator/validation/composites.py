"""Composite validators: objects and arrays.

Both delegate to child validators, never stop at the first failing child, and
re-root every child issue under the field key or index it came from.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from input_validator.errors import ErrorCode
from .base import Validator, check_count
from .paths import field_key, index_mapping
from .result import ValidationIssue, ValidationResult


def _require_validator(name: str, value: Any) -> Validator:
    if not isinstance(value, Validator):
        raise TypeError(f"{name} must be a Validator, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class ObjectValidator(Validator):
    """Mappings checked field by field against an ordered shape.

    Input keys not in the shape are ignored. The validated value holds only the
    declared fields, keyed by their canonical string form.
    """
    shape: tuple[tuple[str, Validator], ...] = ()

    kind: ClassVar[str] = "object"

    @classmethod
    def of(cls, fields: Mapping[Any, Validator] | None = None) -> ObjectValidator:
        """Build from a field mapping, normalizing keys to canonical strings."""
        shape: list[tuple[str, Validator]] = []
        seen: set[str] = set()
        for key, validator in (fields or {}).items():
            name = field_key(key)
            if name in seen:
                raise ValueError(f"Duplicate field key {name!r} in object schema")
            seen.add(name)
            shape.append((name, _require_validator(f"Field {name!r}", validator)))
        return cls(shape=tuple(shape))

    @property
    def fields(self) -> dict[str, Validator]:
        return dict(self.shape)

    def perform_validation(self, value: Any) -> ValidationResult:
        if not isinstance(value, Mapping):
            return self._type_mismatch("object (mapping)", value)

        data = index_mapping(value)
        validated: dict[str, Any] = {}
        issues: list[ValidationIssue] = []

        for name, validator in self.shape:
            result = validator.validate(data.get(name))
            if result.valid:
                validated[name] = result.value
            else:
                issues.extend(issue.nested_under(name) for issue in result.errors)

        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(validated)


@dataclass(frozen=True, slots=True)
class ArrayValidator(Validator):
    """Lists or tuples whose every item passes one item validator."""
    item_validator: Validator
    min_count: int | None = None
    max_count: int | None = None

    kind: ClassVar[str] = "array"

    def __post_init__(self):
        _require_validator("item_validator", self.item_validator)

    def min_items(self, count: int) -> ArrayValidator:
        return replace(self, min_count=check_count("min_items", count))

    def max_items(self, count: int) -> ArrayValidator:
        return replace(self, max_count=check_count("max_items", count))

    def perform_validation(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return self._type_mismatch("array", value)

        if self.min_count is not None and len(value) < self.min_count:
            return self._fail(f"Array must have at least {self.min_count} items", ErrorCode.E2003_OUT_OF_RANGE)

        if self.max_count is not None and len(value) > self.max_count:
            return self._fail(f"Array must have at most {self.max_count} items", ErrorCode.E2003_OUT_OF_RANGE)

        items: list[Any] = []
        issues: list[ValidationIssue] = []

        for index, item in enumerate(value):
            result = self.item_validator.validate(item)
            if result.valid:
                items.append(result.value)
            else:
                issues.extend(issue.nested_under(index) for issue in result.errors)

        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(items)
