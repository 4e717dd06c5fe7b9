"""
Unit tests for the text extractors.
Tests: financial, booking references, contact info.
"""
import time

import pytest

from safe_email.extraction.booking import extract_booking_references
from safe_email.extraction.contacts import extract_contact_info
from safe_email.extraction.financial import extract_financial_data, parse_amount
from safe_email.models.extracted import FinancialItem


class TestFinancialExtractor:
    """Tests for extract_financial_data."""

    def test_clean_profit_with_currency(self):
        items = extract_financial_data("Clean Profit: $1,234.56 USD")

        assert len(items) == 1
        assert items[0].kind == "profit"
        assert items[0].amount == 1234.56
        assert items[0].currency == "USD"
        assert items[0].label == "Clean Profit: $1,234.56 USD"

    def test_non_numeric_amount_discarded(self):
        assert extract_financial_data("Profit: abc") == ()

    def test_separator_only_amount_discarded(self):
        assert extract_financial_data("Total: ,") == ()

    def test_currency_defaults_to_usd(self):
        items = extract_financial_data("Amount: 200")
        assert items == (FinancialItem("price", 200.0, "USD", "Amount: 200"),)

    def test_currency_code_uppercased(self):
        items = extract_financial_data("Total: 99 eur")
        assert items[0].currency == "EUR"

    def test_pass_order_profit_price_fee(self):
        text = "Service Fee: $25\nSelling Price: €1,500 EUR\nProfit After: 120"
        items = extract_financial_data(text)

        assert [i.kind for i in items] == ["profit", "price", "fee"]
        assert [i.amount for i in items] == [120.0, 1500.0, 25.0]
        assert items[1].currency == "EUR"

    def test_bold_profit_value(self):
        items = extract_financial_data("Profit: *$75.00*")
        assert len(items) == 1
        assert items[0].amount == 75.0

    def test_case_insensitive_labels(self):
        items = extract_financial_data("net price: 410\nTIPS: 20")
        assert [(i.kind, i.amount) for i in items] == [("price", 410.0), ("fee", 20.0)]

    def test_repeated_amounts_not_deduplicated(self):
        items = extract_financial_data("Price: 100\nPrice: 100")
        assert len(items) == 2

    def test_empty_input(self):
        assert extract_financial_data("") == ()
        assert extract_financial_data(None) == ()

    def test_parse_amount(self):
        assert parse_amount("12,345.5") == 12345.5
        assert parse_amount(",") is None
        assert parse_amount("1.") == 1.0


class TestBookingReferenceExtractor:
    """Tests for extract_booking_references."""

    def test_keyword_and_bare_token_deduplicated(self):
        refs = extract_booking_references("PNR: ABC123\n\nYour code again:\nABC123")
        assert refs == ("ABC123",)

    def test_keyword_patterns(self):
        text = "Booking: XK9PQ2\nReference: 77ZZ\nEK #: 4R7K2P"
        assert extract_booking_references(text) == ("XK9PQ2", "77ZZ", "4R7K2P")

    def test_keywords_case_insensitive_code_uppercase(self):
        assert extract_booking_references("pnr: QX42LM") == ("QX42LM",)
        assert extract_booking_references("booking: confirmed") == ()

    def test_bare_six_letter_token_is_broad(self):
        refs = extract_booking_references("Hotel PARKER is booked, see QWERTY")
        assert refs == ("PARKER", "QWERTY")

    def test_longer_uppercase_words_ignored(self):
        assert extract_booking_references("Status: CONFIRMED") == ()

    def test_asterisk_wrapped_codes(self):
        refs = extract_booking_references("Ref *QX12P* then PNR: ZZZ999")
        assert refs == ("ZZZ999", "QX12P")

    def test_empty_input(self):
        assert extract_booking_references("") == ()
        assert extract_booking_references(None) == ()


class TestContactExtractor:
    """Tests for extract_contact_info."""

    def test_phone_with_extension_and_email(self):
        contacts = extract_contact_info("Call 305-555-0100 ext. 12 or mail ops@example.com")

        assert [c.kind for c in contacts] == ["phone", "email", "website"]
        assert contacts[0].value == "305-555-0100 ext. 12"
        assert contacts[0].label == "ext. 12"
        assert contacts[1].value == "ops@example.com"
        assert contacts[2].value == "example.com"

    def test_phone_without_extension_has_no_label(self):
        contacts = extract_contact_info("Phone (305) 555-0100")
        assert len(contacts) == 1
        assert contacts[0].value == "(305) 555-0100"
        assert contacts[0].label is None

    def test_websites_with_and_without_scheme(self):
        contacts = extract_contact_info("Visit https://www.example.com or travel.co.uk")
        values = [c.value for c in contacts if c.kind == "website"]
        assert values == ["https://www.example.com", "travel.co.uk"]

    def test_no_deduplication(self):
        contacts = extract_contact_info("a@x.com a@x.com")
        assert len([c for c in contacts if c.kind == "email"]) == 2

    @pytest.mark.parametrize("value", ["", None, "no contacts here"])
    def test_nothing_found(self, value):
        assert extract_contact_info(value) == ()

    def test_long_token_runs_scan_quickly(self):
        start = time.perf_counter()
        assert extract_contact_info("a" * 100000) == ()
        assert extract_contact_info("x" * 100000 + "@" + "y" * 100000) == ()
        assert time.perf_counter() - start < 1.0

    def test_domain_after_at_sign_still_found(self):
        contacts = extract_contact_info("write to team.lead@agency.travel today")
        assert [c.value for c in contacts] == ["team.lead@agency.travel", "team.lead", "agency.travel"]
