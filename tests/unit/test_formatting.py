"""
Unit tests for display formatting helpers.
"""
import pytest

from safe_email.presentation.formatting import (
    amount_text,
    format_currency,
    format_phone_number,
    image_alt,
    website_href,
)


class TestFormatCurrency:

    @pytest.mark.parametrize("amount,currency,expected", [
        (1234.56, "USD", "$1,234.56"),
        (1234.56, "EUR", "€1,234.56"),
        (1234.56, "GBP", "£1,234.56"),
        (1234.56, "JPY", "¥1,235"),
        (0, "usd", "$0.00"),
        (1234.56, "CHF", "CHF 1,234.56"),
        (1234.5, "JPY", "¥1,235"),
        (2.5, "JPY", "¥3"),
        (0.125, "USD", "$0.13"),
        (1.005, "USD", "$1.01"),
        (1e30, "USD", "$1,000,000,000,000,000,000,000,000,000,000.00"),
    ])
    def test_format(self, amount, currency, expected):
        assert format_currency(amount, currency) == expected


class TestFormatPhoneNumber:

    def test_ten_digits_formatted(self):
        assert format_phone_number("305.555.0100") == "(305) 555-0100"

    def test_other_lengths_unchanged(self):
        assert format_phone_number("+1 (305) 555-0142") == "+1 (305) 555-0142"
        assert format_phone_number("555-0100") == "555-0100"


class TestSmallHelpers:

    def test_website_href(self):
        assert website_href("www.example.com") == "https://www.example.com"
        assert website_href("http://example.com") == "http://example.com"

    def test_image_alt_fallback(self):
        assert image_alt("Logo", 0) == "Logo"
        assert image_alt(None, 0) == "Email image 1"
        assert image_alt("", 2) == "Email image 3"

    @pytest.mark.parametrize("amount,expected", [
        (150.0, "150"),
        (589.5, "589.5"),
        (1234.56, "1234.56"),
        (0.5, "0.5"),
        (0.000001, "0.000001"),
        (1e16, "10000000000000000"),
        (1e-7, "1e-7"),
        (1e21, "1e+21"),
        (1.23e-18, "1.23e-18"),
        (-2.5, "-2.5"),
        (0.0, "0"),
    ])
    def test_amount_text(self, amount, expected):
        assert amount_text(amount) == expected
