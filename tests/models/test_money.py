"""Tests for the cents primitive."""

import pytest

from models.money import format_cents, parse_cents
from services.errors import ValidationError


class TestParseCents:
    """Tests for parse_cents."""

    def test_accepts_int(self):
        assert parse_cents(1250) == 1250

    def test_accepts_digit_string(self):
        assert parse_cents(" 1250 ") == 1250
        assert parse_cents("-3") == -3

    @pytest.mark.parametrize("value", [12.5, 1.0, "12.50", "1e3", "", None, True, False])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="whole number of cents"):
            parse_cents(value)

    def test_error_names_field(self):
        with pytest.raises(ValidationError, match="Budget must be"):
            parse_cents(1.5, "Budget")


class TestFormatCents:
    """Tests for format_cents."""

    def test_formats_with_separators(self):
        assert format_cents(123456) == "1,234.56"

    def test_pads_fraction(self):
        assert format_cents(5) == "0.05"

    def test_negative(self):
        assert format_cents(-150000) == "-1,500.00"
