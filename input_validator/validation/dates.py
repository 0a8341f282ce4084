"""Date parsing.

Strings are tried as an ISO 8601 date, then as an ISO 8601 datetime (a
trailing "Z" is read as UTC), then against each configured strptime format.
Datetimes are reduced to their calendar date.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from input_validator.config import get_settings
from input_validator.errors import AppError, Err, ErrorCode, Ok, Result
from input_validator.logging import validation_logger


def as_date(value: date) -> date:
    """Reduce a date or datetime to a plain date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: Any, formats: Sequence[str] | None = None) -> Result[date, AppError]:
    """Parse a date string. Returns Ok(date) or Err with E2012_INVALID_DATE."""
    if not isinstance(value, str):
        return Err(AppError(
            code=ErrorCode.E2004_INVALID_TYPE,
            message=f"Cannot parse {type(value).__name__} as date",
        ))

    settings = get_settings()
    text = value.strip()
    if text:
        try:
            return Ok(date.fromisoformat(text))
        except ValueError:
            pass

        try:
            return Ok(datetime.fromisoformat(text.replace("Z", "+00:00")).date())
        except ValueError:
            pass

        for fmt in formats if formats is not None else settings.DATE_FORMATS:
            try:
                return Ok(datetime.strptime(text, fmt).date())
            except ValueError:
                continue

    if settings.LOG_VALIDATION_FAILURES:
        validation_logger.debug("date_parse_failed", value=value[:50])
    return Err(AppError(
        code=ErrorCode.E2012_INVALID_DATE,
        message="Invalid date format",
        metadata={"value": value[:50]},
    ))


def coerce_bound(value: date | str) -> date:
    """Turn a configured bound into a date. Raises ValueError for bad bounds."""
    if isinstance(value, date):
        return as_date(value)
    if isinstance(value, str):
        parsed = parse_date(value)
        if parsed.is_ok():
            return parsed.unwrap()
        raise ValueError(f"Cannot use {value!r} as a date bound")
    raise TypeError(f"Date bound must be a date or string, got {type(value).__name__}")
