"""
JSON Schemas for the extraction output contract.

Two schemas:
1. EXTRACTED_DATA_SCHEMA — ExtractedData.to_dict() as consumed by the UI
2. EMAIL_VIEW_SCHEMA     — EmailView.to_dict() (sanitized HTML + extracted data)
"""
from safe_email.config.constants import CURRENCY_CODES

# =============================================================================
# 1. Extracted data
# =============================================================================
_FINANCIAL_ITEM: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "amount", "currency", "label"],
    "properties": {
        "kind": {"type": "string", "enum": ["profit", "fee", "price"]},
        "amount": {"type": "number", "minimum": 0},
        "currency": {"type": "string", "enum": CURRENCY_CODES},
        "label": {"type": "string", "minLength": 1},
    },
}

_CONTACT_ITEM: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "value"],
    "properties": {
        "kind": {"type": "string", "enum": ["phone", "email", "website"]},
        "value": {"type": "string", "minLength": 1},
        "label": {"type": "string"},
    },
}

_BUSINESS_INFO: dict = {
    "type": "object",
    "additionalProperties": False,
    "minProperties": 1,
    "properties": {
        "name": {"type": "string"},
        "title": {"type": "string"},
        "company": {"type": "string"},
        "phone": {
            "type": "array",
            "minItems": 1,
            "items": {"type": "string"},
        },
        "email": {"type": "string"},
        "website": {"type": "string"},
        "address": {"type": "string"},
    },
}

_IMAGE_ITEM: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["src", "role"],
    "properties": {
        "src": {"type": "string", "minLength": 1},
        "alt": {"type": "string"},
        "width": {"type": "string"},
        "height": {"type": "string"},
        "role": {
            "type": "string",
            "enum": ["signature", "header", "content", "attachment"],
        },
    },
}

EXTRACTED_DATA_SCHEMA: dict = {
    "name": "email_extracted_data_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["financialData", "bookingRefs", "contactInfo", "businessInfo", "images"],
        "properties": {
            "financialData": {"type": "array", "items": _FINANCIAL_ITEM},
            "bookingRefs": {
                "type": "array",
                "uniqueItems": True,
                "items": {"type": "string", "pattern": "^[A-Z0-9]{4,8}$"},
            },
            "contactInfo": {"type": "array", "items": _CONTACT_ITEM},
            "businessInfo": {"oneOf": [{"type": "null"}, _BUSINESS_INFO]},
            "images": {"type": "array", "items": _IMAGE_ITEM},
        },
    },
}

# =============================================================================
# 2. Email view
# =============================================================================
EMAIL_VIEW_SCHEMA: dict = {
    "name": "email_view_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["sanitizedHtml", "extracted"],
        "properties": {
            "sanitizedHtml": {"type": "string"},
            "subject": {"type": "string"},
            "extracted": EXTRACTED_DATA_SCHEMA["schema"],
        },
    },
}
