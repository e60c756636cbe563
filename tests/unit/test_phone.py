"""Tests for phone normalization."""

import pytest

from app.core.roster import normalize_phone


class TestNormalizePhone:
    """Test normalize_phone."""

    @pytest.mark.parametrize("raw", [
        "(214) 991-9940",
        "214-991-9940",
        "2149919940",
        "12149919940",
        "+12149919940",
        "+1 (214) 991 9940",
    ])
    def test_us_formats_normalize_identically(self, raw):
        """Equivalent US numbers share one canonical form."""
        assert normalize_phone(raw) == "+12149919940"

    def test_empty_input(self):
        """Empty or missing input yields empty string."""
        assert normalize_phone("") == ""
        assert normalize_phone(None) == ""

    def test_no_digits(self):
        """Input without digits yields empty string."""
        assert normalize_phone("call me") == ""

    def test_non_us_number_keeps_digits(self):
        """Non-US numbers are only stripped of formatting."""
        assert normalize_phone("+44 20 7946 0958") == "+442079460958"

    def test_eleven_digits_not_starting_with_one(self):
        """11 digits without a leading 1 fall back to plain '+' prefix."""
        assert normalize_phone("52 155 1234 5678") == "+5215512345678"
        assert normalize_phone("22149919940") == "+22149919940"
