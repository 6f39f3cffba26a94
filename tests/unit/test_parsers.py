"""Unit tests for month and amount parsing."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from dues.services.parsers import first_of_month, parse_amount, parse_month


class TestParseMonth:
    """Tests for parse_month."""

    def test_year_month_string(self):
        assert parse_month("2023-11") == date(2023, 11, 1)

    def test_full_date_string(self):
        assert parse_month("2023-11-30") == date(2023, 11, 1)

    def test_surrounding_whitespace(self):
        assert parse_month("  2023-11 ") == date(2023, 11, 1)

    def test_date(self):
        assert parse_month(date(2024, 2, 29)) == date(2024, 2, 1)

    def test_datetime(self):
        assert parse_month(datetime(2024, 2, 29, 13, 45)) == date(2024, 2, 1)

    @pytest.mark.parametrize("value", ["", "2023", "11-2023", "2023-13", "2023/11"])
    def test_invalid_strings(self, value):
        with pytest.raises(ValueError, match="Cannot parse month"):
            parse_month(value)

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported type"):
            parse_month(202311)


class TestParseAmount:
    """Tests for parse_amount."""

    def test_string(self):
        assert parse_amount("500.00") == Decimal("500.00")

    def test_int(self):
        assert parse_amount(120) == Decimal("120")

    def test_decimal(self):
        assert parse_amount(Decimal("99.99")) == Decimal("99.99")

    def test_zero_is_allowed(self):
        assert parse_amount("0") == Decimal("0")

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            parse_amount("-1")

    def test_float_rejected(self):
        with pytest.raises(ValueError, match="use str, int or Decimal"):
            parse_amount(1.5)

    def test_garbage_rejected(self):
        with pytest.raises(ValueError, match="Cannot parse amount"):
            parse_amount("five hundred")

    def test_infinity_rejected(self):
        with pytest.raises(ValueError, match="must be finite"):
            parse_amount("Infinity")


def test_first_of_month():
    assert first_of_month(date(2023, 12, 31)) == date(2023, 12, 1)
