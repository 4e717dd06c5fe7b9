"""
Unit tests for output contract validation.
"""
from safe_email.extraction.validation import validate_email_view, validate_extracted_data
from safe_email.models.extracted import (
    BusinessInfo,
    ContactItem,
    EmailImage,
    ExtractedData,
    FinancialItem,
)
from safe_email.presentation.adapter import EmailView


def _payload(**overrides):
    payload = ExtractedData.empty().to_dict()
    payload.update(overrides)
    return payload


class TestValidateExtractedData:

    def test_empty_result_is_valid(self):
        result = validate_extracted_data(ExtractedData.empty())

        assert result.valid
        assert result.errors == []
        assert result.data == {
            "financialData": [],
            "bookingRefs": [],
            "contactInfo": [],
            "businessInfo": None,
            "images": [],
        }

    def test_populated_result_is_valid(self):
        data = ExtractedData(
            financial_data=(FinancialItem("price", 100.0, "USD", "Price: 100"),),
            booking_refs=("ABC123",),
            contact_info=(ContactItem("phone", "305-555-0100 ext. 1", "ext. 1"),),
            business_info=BusinessInfo(name="Alex Kim", phone=("305-555-0100",)),
            images=(EmailImage(src="logo.png", role="signature"),),
        )
        assert validate_extracted_data(data).valid

    def test_bad_booking_reference(self):
        result = validate_extracted_data(_payload(bookingRefs=["abc"]))

        assert not result.valid
        assert "bookingRefs/0" in result.errors[0]

    def test_duplicate_booking_references(self):
        assert not validate_extracted_data(_payload(bookingRefs=["ABC123", "ABC123"])).valid

    def test_empty_business_info_rejected(self):
        assert not validate_extracted_data(_payload(businessInfo={})).valid

    def test_unknown_currency_rejected(self):
        item = {"kind": "fee", "amount": 5, "currency": "CHF", "label": "Fee: 5"}
        assert not validate_extracted_data(_payload(financialData=[item])).valid

    def test_missing_key_reported_at_root(self):
        payload = _payload()
        del payload["images"]

        result = validate_extracted_data(payload)

        assert not result.valid
        assert "<root>" in result.errors[0]

    def test_amount_matched_by_several_passes_warns(self):
        data = ExtractedData(financial_data=(
            FinancialItem("price", 100.0, "USD", "Total: 100"),
            FinancialItem("fee", 100.0, "USD", "TP: 100"),
        ))
        result = validate_extracted_data(data)

        assert result.valid
        assert len(result.warnings) == 1
        assert "['fee', 'price']" in result.warnings[0]


class TestValidateEmailView:

    def test_rendered_view_is_valid(self, adapter):
        view = adapter.render("<p>PNR: QXZTRA<br>Service Fee: $150 USD</p>", subject="Dubai group")

        result = validate_email_view(view)

        assert result.valid
        assert result.errors == []
        assert result.data["subject"] == "Dubai group"

    def test_dict_input(self):
        payload = EmailView(sanitized_html="<p>x</p>", extracted=ExtractedData.empty()).to_dict()
        assert validate_email_view(payload).valid

    def test_extra_key_rejected(self):
        payload = EmailView(sanitized_html="", extracted=ExtractedData.empty()).to_dict()
        payload["rawHtml"] = "<script>x</script>"

        result = validate_email_view(payload)

        assert not result.valid
        assert "<root>" in result.errors[0]

    def test_non_string_html_rejected(self):
        payload = EmailView(sanitized_html="", extracted=ExtractedData.empty()).to_dict()
        payload["sanitizedHtml"] = None

        result = validate_email_view(payload)

        assert not result.valid
        assert "sanitizedHtml" in result.errors[0]

    def test_nested_extracted_errors_reported(self):
        payload = EmailView(sanitized_html="", extracted=ExtractedData.empty()).to_dict()
        payload["extracted"]["bookingRefs"] = ["abc"]

        result = validate_email_view(payload)

        assert not result.valid
        assert "extracted/bookingRefs/0" in result.errors[0]
