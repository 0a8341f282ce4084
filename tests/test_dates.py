"""Tests for validation/dates.py."""

from datetime import date, datetime

import pytest

from input_validator import Err, ErrorCode, Ok, Schema
from input_validator.validation.dates import as_date, coerce_bound, parse_date


class TestParseDate:
    """Tests for parse_date."""

    @pytest.mark.parametrize("text,expected", [
        ("2023-01-01", date(2023, 1, 1)),
        ("  2023-01-01  ", date(2023, 1, 1)),
        ("2023-06-15T08:30:00", date(2023, 6, 15)),
        ("2023-06-15T23:30:00+02:00", date(2023, 6, 15)),
        ("2023-06-15T08:30:00Z", date(2023, 6, 15)),
        ("2023/06/15", date(2023, 6, 15)),
        ("15 June 2023", date(2023, 6, 15)),
        ("Jun 15 2023", date(2023, 6, 15)),
        ("June 15, 2023", date(2023, 6, 15)),
    ])
    def test_parses_supported_forms(self, text, expected):
        result = parse_date(text)
        assert isinstance(result, Ok)
        assert result.unwrap() == expected

    @pytest.mark.parametrize("text", ["invalid", "", "2023-13-01", "2023-02-30"])
    def test_rejects_unparsable(self, text):
        result = parse_date(text)
        assert isinstance(result, Err)
        assert result.unwrap_err().code is ErrorCode.E2012_INVALID_DATE
        assert result.unwrap_err().message == "Invalid date format"

    def test_rejects_non_strings(self):
        result = parse_date(20230101)
        assert result.is_err()
        assert result.unwrap_err().code is ErrorCode.E2004_INVALID_TYPE

    def test_explicit_formats(self):
        assert parse_date("15.06.2023", formats=["%d.%m.%Y"]).unwrap() == date(2023, 6, 15)
        assert parse_date("2023/06/15", formats=[]).is_err()

    def test_formats_from_settings(self, monkeypatch):
        assert parse_date("15.06.2023").is_err()
        monkeypatch.setenv("INPUT_VALIDATOR_DATE_FORMATS", '["%d.%m.%Y"]')
        from input_validator.config import get_settings
        get_settings.cache_clear()
        assert parse_date("15.06.2023").unwrap() == date(2023, 6, 15)
        assert Schema.date().validate("15.06.2023").value == date(2023, 6, 15)


class TestBounds:
    """Tests for as_date and coerce_bound."""

    def test_as_date(self):
        assert as_date(datetime(2023, 1, 2, 3, 4)) == date(2023, 1, 2)
        assert as_date(date(2023, 1, 2)) == date(2023, 1, 2)

    def test_coerce_bound(self):
        assert coerce_bound("2023-01-02") == date(2023, 1, 2)
        assert coerce_bound(datetime(2023, 1, 2, 3, 4)) == date(2023, 1, 2)

    def test_coerce_bound_rejects_other_types(self):
        with pytest.raises(TypeError):
            coerce_bound(20230102)
