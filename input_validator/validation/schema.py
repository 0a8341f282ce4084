"""Schema factory: one constructor per validator kind."""
from __future__ import annotations

from typing import Any, Mapping

from .base import Validator
from .composites import ArrayValidator, ObjectValidator
from .primitives import BooleanValidator, DateValidator, NumberValidator, StringValidator


class Schema:
    """Entry point for building validator trees.

    Usage:
        address = Schema.object({
            "street": Schema.string(),
            "postal_code": Schema.string().pattern(r"\\d{5}").with_message("Postal code must be 5 digits"),
        })
        user = Schema.object({
            "name": Schema.string().min_length(2).max_length(50),
            "age": Schema.number().integer().optional(),
            "tags": Schema.array(Schema.string()).max_items(10),
            "address": address.optional(),
        })
        result = user.validate(payload)
    """

    @staticmethod
    def string() -> StringValidator:
        return StringValidator()

    @staticmethod
    def number() -> NumberValidator:
        return NumberValidator()

    @staticmethod
    def boolean() -> BooleanValidator:
        return BooleanValidator()

    @staticmethod
    def date() -> DateValidator:
        return DateValidator()

    @staticmethod
    def object(fields: Mapping[Any, Validator] | None = None) -> ObjectValidator:
        return ObjectValidator.of(fields)

    @staticmethod
    def array(item_validator: Validator) -> ArrayValidator:
        return ArrayValidator(item_validator)
